"""
Jira Resume API
"""
