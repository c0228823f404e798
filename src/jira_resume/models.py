"""
資料模型

- Account: Jira 帳號（URL + Email + API Token）
- DateRange / DateRangeSelector: 查詢日期範圍（含結束日整天）
- Comment: worklog 註解，在解析 Jira 回應時即決定為純文字或 ADF 文件
- Worklog / Issue: Jira 回傳的 worklog 資料
- WorklogEntry: 顯示用的 worklog 項目
- ReportRequest: 單次報告生成的請求參數
"""

import logging
import time as _time
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional, Union

from .errors import InvalidDateRange

logger = logging.getLogger(__name__)

NO_COMMENT = "No comment"
END_OF_DAY = time(23, 59, 59, 999000)


# ============================================================
# Account
# ============================================================

@dataclass
class Account:
    """Jira 帳號"""
    id: str
    name: str
    email: str
    token: str
    jira_url: str

    @classmethod
    def create(cls, name: str, email: str, token: str, jira_url: str) -> "Account":
        """建立新帳號，id 使用建立時間（毫秒）"""
        return cls(
            id=str(int(_time.time() * 1000)),
            name=name,
            email=email,
            token=token,
            jira_url=jira_url,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Account":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            email=data.get("email", ""),
            token=data.get("token", ""),
            jira_url=data.get("jiraUrl", ""),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "token": self.token,
            "jiraUrl": self.jira_url,
        }


# ============================================================
# Date range
# ============================================================

@dataclass(frozen=True)
class DateRange:
    """日期範圍，start 與 end 皆包含"""
    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidDateRange("End date cannot be earlier than start date")

    @classmethod
    def parse(cls, start: str, end: str) -> "DateRange":
        """從 YYYY-MM-DD 字串建立"""
        try:
            start_date = datetime.strptime(start, "%Y-%m-%d").date()
            end_date = datetime.strptime(end, "%Y-%m-%d").date()
        except ValueError as e:
            raise InvalidDateRange(f"Invalid date: {e}")
        return cls(start_date, end_date)

    @classmethod
    def default(cls, today: Optional[date] = None) -> "DateRange":
        """預設範圍：過去 7 天到今天"""
        today = today or date.today()
        return cls(today - timedelta(days=7), today)

    def bounds(self, tz: Optional[tzinfo] = None) -> tuple[datetime, datetime]:
        """
        取得過濾用的時間邊界

        Args:
            tz: 時區，None 則使用本機時區

        Returns:
            (開始日 00:00:00.000, 結束日 23:59:59.999)
        """
        start = datetime.combine(self.start, time.min)
        end = datetime.combine(self.end, END_OF_DAY)
        if tz is None:
            return start.astimezone(), end.astimezone()
        return start.replace(tzinfo=tz), end.replace(tzinfo=tz)

    def contains(self, ts: datetime, tz: Optional[tzinfo] = None) -> bool:
        start, end = self.bounds(tz)
        if ts.tzinfo is None:
            ts = ts.astimezone()
        return start <= ts <= end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} ~ {self.end.isoformat()}"


class DateRangeSelector:
    """
    開始／結束日期選擇器

    修改後若結束日早於開始日，拒絕修改並保留原本的值。
    """

    def __init__(self, initial: Optional[DateRange] = None):
        self.value = initial or DateRange.default()

    def set_start(self, start: date) -> bool:
        return self._update(start, self.value.end)

    def set_end(self, end: date) -> bool:
        return self._update(self.value.start, end)

    def update(self, start: Optional[date] = None, end: Optional[date] = None) -> bool:
        """同時修改開始與結束日期，未指定者保留原值"""
        return self._update(start or self.value.start, end or self.value.end)

    def _update(self, start: date, end: date) -> bool:
        try:
            self.value = DateRange(start, end)
        except InvalidDateRange as e:
            logger.warning(f"{e} ({start} ~ {end}), keeping {self.value}")
            return False
        return True


# ============================================================
# Comment (plain text or Atlassian Document Format)
# ============================================================

@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Block:
    """ADF 區塊，runs 為該區塊內各節點的文字"""
    type: str
    runs: tuple[str, ...] = ()


@dataclass(frozen=True)
class RichDocument:
    blocks: tuple[Block, ...] = ()


Comment = Union[PlainText, RichDocument, None]


def parse_comment(raw) -> Comment:
    """將 Jira 回傳的 comment 欄位轉為 Comment"""
    if not raw:
        return None
    if isinstance(raw, str):
        return PlainText(raw)
    if isinstance(raw, dict):
        blocks = []
        for item in raw.get("content") or []:
            runs = tuple(node.get("text") or "" for node in item.get("content") or [])
            blocks.append(Block(type=item.get("type", ""), runs=runs))
        return RichDocument(tuple(blocks))
    return None


def comment_text(comment: Comment) -> str:
    """
    取出註解文字

    - 純文字：原樣回傳
    - ADF：只取 paragraph 區塊，區塊內以空白連接，區塊間以換行連接
    - 無內容：回傳 "No comment"
    """
    if isinstance(comment, PlainText):
        return comment.text or NO_COMMENT
    if isinstance(comment, RichDocument):
        paragraphs = []
        for block in comment.blocks:
            if block.type != "paragraph":
                continue
            text = " ".join(run for run in block.runs if run)
            if text:
                paragraphs.append(text)
        return "\n".join(paragraphs) or NO_COMMENT
    return NO_COMMENT


def format_time_spent(seconds: int) -> str:
    """秒數轉為 "Hh Mm" 格式"""
    seconds = int(seconds or 0)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m"


# ============================================================
# Worklog / Issue
# ============================================================

def parse_jira_datetime(value: str) -> datetime:
    """解析 Jira 時間格式 (e.g., 2024-01-03T10:00:00.000+0000)"""
    try:
        return datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%f%z")
    except ValueError:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass
class Worklog:
    """單筆 Jira worklog"""
    id: str
    started: datetime
    time_spent_seconds: int
    comment: Comment = None

    @classmethod
    def from_jira(cls, data: dict) -> "Worklog":
        return cls(
            id=str(data.get("id", "")),
            started=parse_jira_datetime(data["started"]),
            time_spent_seconds=int(data.get("timeSpentSeconds") or 0),
            comment=parse_comment(data.get("comment")),
        )


@dataclass
class Issue:
    """Jira issue 與其 worklog"""
    key: str
    summary: str
    worklogs: list[Worklog] = field(default_factory=list)
    fetch_error: Optional[str] = None  # 取得 worklog 失敗時保留原始資料

    @property
    def degraded(self) -> bool:
        return self.fetch_error is not None

    @classmethod
    def from_search(cls, data: dict) -> "Issue":
        """從 search API 的 issue 建立（含 search 回傳的內嵌 worklog）"""
        fields = data.get("fields") or {}
        key = data.get("key", "")
        embedded = (fields.get("worklog") or {}).get("worklogs") or []

        worklogs = []
        for raw in embedded:
            try:
                worklogs.append(Worklog.from_jira(raw))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed worklog on {key}: {e!r}")

        return cls(key=key, summary=fields.get("summary", ""), worklogs=worklogs)


@dataclass(frozen=True)
class WorklogEntry:
    """顯示用 worklog 項目"""
    issue_key: str
    summary: str
    time_spent: str
    comment: str
    started: datetime

    @classmethod
    def from_worklog(cls, issue: Issue, worklog: Worklog) -> "WorklogEntry":
        return cls(
            issue_key=issue.key,
            summary=issue.summary,
            time_spent=format_time_spent(worklog.time_spent_seconds),
            comment=comment_text(worklog.comment),
            started=worklog.started,
        )


# ============================================================
# Report request
# ============================================================

class ReportLength(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LONG = "long"


class ReportStyle(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    TECHNICAL = "technical"


class ReportLanguage(str, Enum):
    ENGLISH = "en"
    INDONESIAN = "id"


@dataclass
class ReportRequest:
    """報告生成請求"""
    date_range: DateRange
    account: Account
    length: ReportLength = ReportLength.MEDIUM
    style: ReportStyle = ReportStyle.PROFESSIONAL
    language: ReportLanguage = ReportLanguage.ENGLISH
