"""Prompt templates for memo summaries and tags.

Both builders are pure: the same (title, content, language) always yields the
same string, and title/content are embedded verbatim. Callers validate that
title and content are non-empty before building a prompt.
"""
from app.shared.config import settings

SUMMARY_TEMPLATE = """Summarize the following memo in {language} in at most 3 concise sentences.

Title: {title}

Content:
{content}

Summary:"""

TAGS_TEMPLATE = """Analyze the following memo and generate 3 to 5 suitable tags.
Write the tags in {language}; they should reflect the memo's main keywords or topics.
Respond with a JSON array only. Do not include explanations or any other text.

Example format: ["tag1", "tag2", "tag3"]

Title: {title}

Content:
{content}

Tags (JSON array):"""


def _fill(template: str, title: str, content: str, language: str | None) -> str:
    return template.format(language=language or settings.PROMPT_LANGUAGE, title=title, content=content)


def build_summary_prompt(title: str, content: str, language: str | None = None) -> str:
    return _fill(SUMMARY_TEMPLATE, title, content, language)


def build_tag_prompt(title: str, content: str, language: str | None = None) -> str:
    return _fill(TAGS_TEMPLATE, title, content, language)
