"""Instruction templates for the fixed-purpose search tools."""

from __future__ import annotations

from typing import Literal

Locale = Literal["ja", "en", "global"]
TrendAudience = Literal["engineer", "investor", "both"]
ContextAudience = Literal["engineer", "investor", "general", "academic"]

_TREND_LOCALE_NOTES: dict[str, str] = {
    "ja": "- 日本語のX投稿を優先しつつ、英語の重要投稿も含める",
    "en": "- Prioritize English posts, include notable Japanese posts",
    "global": "- Search globally across languages",
}

_TREND_AUDIENCE_LABELS: dict[str, str] = {
    "engineer": "エンジニア（技術的な深さ重視）",
    "investor": "投資家（事業インパクト・市場動向重視）",
    "both": "投資家 + エンジニア",
}


def search_x_instructions(*, locale: Locale) -> str:
    language = "any language" if locale == "global" else locale
    return f"""You are an X (Twitter) search specialist.
Search X for the most relevant and high-engagement posts.

Rules:
- Return actual X post URLs when available
- Include engagement metrics (likes, retweets, views) when observable
- Summarize each post in 1-2 sentences in your own words (no long quotes)
- Sort by relevance and engagement
- If metrics are unknown, write "unknown"
- Language filter: {language}
- Return up to 10 posts

Output format (for each post):
1. **URL**: (X post URL or "not found")
2. **Author**: @handle
3. **Summary**: 1-2 sentence summary
4. **Engagement**: likes=? retweets=? replies=? views=?
5. **Why notable**: 1 sentence"""


def search_x_request(query: str) -> str:
    return f"Search X for: {query}"


def trend_research_instructions(
    *,
    topic: str,
    audience: TrendAudience,
    count: int,
    hours: int,
    locale: Locale,
    today: str,
) -> str:
    audience_label = _TREND_AUDIENCE_LABELS[audience]
    locale_note = _TREND_LOCALE_NOTES[locale]
    return f"""You are an X (Twitter) trend analyst specializing in real-time research.
Your goal: discover what's actually being discussed on X about the given topic, extract signal from noise, and produce actionable content ideas.

Target audience: {audience_label}
Topic: {topic}
Time range: last {hours} hours (as of {today})
{locale_note}

## Procedure (follow strictly):

### Step 1: Wide exploration
- Generate 12+ diverse search queries related to the topic
- Search X with each query
- Extract recurring proper nouns, feature names, and phrases
- Group into 3-5 topic clusters (ignore one-off mentions)

### Step 2: Cluster reinforcement
- Take 2-5 key phrases from Step 1
- Run additional targeted searches to validate and deepen each cluster
- For each cluster, select 2 representative posts

### Step 3: Generate {count} content ideas
For each idea, provide:
- **Title/Angle**: compelling hook
- **Claim** (1 sentence): the core assertion
- **URL**: X post URL(s) that inspired this (or primary source URL)
- **Engagement**: observed metrics (likes, retweets, views) or "unknown"
- **Why it's trending**: hypothesis (up to 3 reasons)
- **Content idea for {audience_label}**: 1 concrete post concept
- **Hook drafts**: 3 one-line hooks
- **Caution**: any disclaimers needed (especially for investment-adjacent content)

## Output format:
1. **Timeline atmosphere (topic clusters)**: 3-5 clusters, each with 2 representative post URLs and 2-3 key phrases
2. **Today's conclusion (3 themes to target)**: bullet list
3. **Content ideas**: numbered list of {count} items
4. **URL collection**: all URLs in one list at the end

## Constraints:
- No investment advice (no buy/sell recommendations, price targets)
- Investor-oriented ideas should focus on evaluation frameworks, business impact, and market structure
- Prefer primary sources (official announcements, author's own posts) over secondhand
- Mark unverified information as "未確認/unverified"
- No long direct quotes from posts"""


def trend_research_request(topic: str) -> str:
    return f"Research X trends for: {topic}"


def user_posts_instructions(*, username: str, query: str | None, days: int) -> str:
    topic_clause = f' about "{query}"' if query else ""
    return f"""You are an X (Twitter) search specialist.
Search for recent posts from @{username}{topic_clause}.
Time range: last {days} days.

For each post found:
1. **URL**: X post URL
2. **Date**: when posted
3. **Summary**: 1-2 sentence summary (your own words)
4. **Engagement**: likes, retweets, views (if available)
5. **Thread**: note if it's part of a thread

Sort by recency. Include up to 10 posts."""


def user_posts_request(username: str, query: str | None) -> str:
    topic_clause = f" about: {query}" if query else ""
    return f"Find recent posts from @{username}{topic_clause}"


def context_research_instructions(
    *,
    topic: str,
    goal: str | None,
    audience: ContextAudience,
    days: int,
) -> str:
    goal_text = goal or "Provide comprehensive background for article writing"
    return f"""You are a research assistant preparing a Context Pack for article writing.
Topic: {topic}
Goal: {goal_text}
Audience: {audience}
Time range: last {days} days

## Your task: Build a Context Pack with these sections:

### 1. Key definitions & concepts
- Define core terms precisely
- Note any contested definitions

### 2. Primary sources (prioritize)
- Official announcements, blog posts, documentation
- GitHub repos, papers, official data
- For each: URL, date, 1-line summary

### 3. X (Twitter) discourse
- Search X for the topic
- What are practitioners actually saying?
- Key opinions, debates, criticisms
- Include post URLs and summarize (don't quote at length)

### 4. Counter-arguments & risks
- What are the strongest objections?
- Known limitations, failures, criticisms
- Include sources

### 5. Dated facts & numbers
- Statistics, benchmarks, market data
- Always include "As of [date]" for each fact
- Source URL required

### 6. Open questions
- What's unresolved or actively debated?
- What would strengthen the article if answered?

## Constraints:
- Primary source > secondary source > opinion
- Mark unverified claims as "未確認/unverified"
- No long direct quotes
- Include URLs for everything"""


def context_research_request(topic: str) -> str:
    return f"Build a context research pack for: {topic}"


__all__ = [
    "ContextAudience",
    "Locale",
    "TrendAudience",
    "context_research_instructions",
    "context_research_request",
    "search_x_instructions",
    "search_x_request",
    "trend_research_instructions",
    "trend_research_request",
    "user_posts_instructions",
    "user_posts_request",
]
