"""
報告 prompt 建構

將 worklog 資料轉為 LLM prompt，依報告長度、風格、語言調整指示。
"""

import json
from dataclasses import dataclass
from datetime import timezone

from .models import (
    Issue,
    ReportLanguage,
    ReportLength,
    ReportStyle,
    comment_text,
    format_time_spent,
)


@dataclass(frozen=True)
class LengthGuide:
    format: str
    max_length: str
    structure: tuple[str, ...]


LENGTH_GUIDES = {
    ReportLength.SMALL: LengthGuide(
        format="Create a concise weekly report summary",
        max_length="150 words",
        structure=(
            "Key accomplishments",
            "Time allocation",
            "Challenges",
        ),
    ),
    ReportLength.MEDIUM: LengthGuide(
        format="Create a detailed weekly status report",
        max_length="300 words",
        structure=(
            "Overall progress",
            "Tasks by category",
            "Time allocation",
            "Challenges and solutions",
            "Next steps",
        ),
    ),
    ReportLength.LONG: LengthGuide(
        format="Create a comprehensive progress report",
        max_length="500 words",
        structure=(
            "Executive summary",
            "Detailed tasks breakdown",
            "Time investment",
            "Technical details",
            "Ongoing work status",
            "Dependencies",
            "Risks and mitigations",
        ),
    ),
}

STYLE_GUIDES = {
    ReportStyle.PROFESSIONAL: "Use formal business language with clear, concise statements",
    ReportStyle.CASUAL: "Use a conversational tone while maintaining professionalism",
    ReportStyle.TECHNICAL: "Include technical details and specific terminology",
}

LANGUAGE_PROMPTS = {
    ReportLanguage.ENGLISH: "Write the response in English.",
    ReportLanguage.INDONESIAN: "Write the response in Bahasa Indonesia using formal business language.",
}

GUIDELINES = (
    "Group related tasks together",
    "Include time spent on each major area",
    "Highlight specific accomplishments",
    "Note any challenges encountered",
    "Keep technical details clear",
    "Focus on value delivered",
    "Include specific metrics where available",
)

OUTPUT_SECTIONS = (
    ("OVERVIEW", "Period accomplishments summary"),
    ("TASKS AND DETAILS", "Tasks breakdown from worklogs comments"),
    ("CHALLENGES", "Issues and solutions"),
    ("NEXT STEPS", "Upcoming priorities"),
)


def summarize_issues(issues: list[Issue]) -> list[dict]:
    """將 issue 轉為 prompt 用的精簡結構"""
    return [
        {
            "key": issue.key,
            "summary": issue.summary,
            "worklogs": [
                {
                    "timeSpent": format_time_spent(log.time_spent_seconds),
                    "comment": comment_text(log.comment),
                    "started": log.started.astimezone(timezone.utc).date().isoformat(),
                }
                for log in issue.worklogs
            ],
        }
        for issue in issues
    ]


def build_prompt(
    issues: list[Issue],
    length: ReportLength = ReportLength.MEDIUM,
    style: ReportStyle = ReportStyle.PROFESSIONAL,
    language: ReportLanguage = ReportLanguage.ENGLISH,
) -> str:
    """
    構建報告 prompt

    Args:
        issues: worklog 資料
        length: 報告長度 (small / medium / long)
        style: 寫作風格 (professional / casual / technical)
        language: 回應語言 (en / id)

    Returns:
        prompt 字串
    """
    guide = LENGTH_GUIDES[ReportLength(length)]
    structure = "\n".join(f"* {item}" for item in guide.structure)
    guidelines = "\n".join(f"- {item}" for item in GUIDELINES)
    sections = "\n\n".join(f"{name}:\n[{hint}]" for name, hint in OUTPUT_SECTIONS)
    activities = json.dumps(summarize_issues(issues), indent=2, ensure_ascii=False)

    return f"""As a technical team member reporting to their manager, create a status report following these guidelines:

Format: {guide.format}
Maximum Length: {guide.max_length}
Language: {LANGUAGE_PROMPTS[ReportLanguage(language)]}
Writing Style: {STYLE_GUIDES[ReportStyle(style)]}
Structure:
{structure}

Work Activities to Report:
{activities}

Important:
{guidelines}

Format the response with clear sections:

{sections}

Use asterisks (*) for bullet points. Don't use any other formatting. Use spacing and line breaks for readability.
"""
