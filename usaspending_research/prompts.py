"""Prompt templates exposed to the host.

DAILY_BRIEF_PROMPT walks an agent through a daily award brief using the
search tools registered alongside it:
1. Find base awards signed on the target date (search_new_awards)
2. Pick 0-3 awards worth a deep dive (get_award_details with the internalId)
3. Summarize the market (analyze_competition, spending trends)
"""

from datetime import date, timedelta
from typing import Optional

from .dates import ResolvedDate, format_date, parse_natural_date

DEFAULT_NAICS_CODES = ["541511", "541512", "541513", "541519", "541611"]

DAILY_BRIEF_PROMPT = """# Daily Federal Contract Awards Brief

## Your Role

You are a market intelligence analyst monitoring federal contract awards. Tell the
reader what was signed, who won it, and why it matters. Keep it tight: this is a
daily update, not a strategy document.

Focus area: {focus}

---

## Research Process

### Step 1: Find Recent Awards

Search for newly signed base awards with `search_new_awards`:
- Start with the target date (single day)
- If there are no results, go back one day at a time (max 7 days)
- Suggested parameters:
  - `min_amount: 250000` (filters out commodity purchases)
  - `limit: 100` (so nothing is missed)
  - `naics_codes: {naics_codes}`

### Step 2: Prioritize

Pick **0-3 awards** worth detailed analysis: large awards, notable recipients,
agencies in the focus area, or unusual procurement approaches. Zero deep dives is
fine if nothing stands out.

### Step 3: Get Context

- Use `get_award_details` with the `internalId` (CONT_AWD_...) from the search
  results, not the PIID
- Use `search_idv_awards` when the award is a task order under a contract vehicle
- Use `analyze_competition` or `get_spending_over_time` for market trends

---

## Output Format

- **Executive Summary:** key bullets
- **Deep Dives (0-3):** 200-300 words each: what it is, context, why it matters
- **Market Snapshot:** other notable awards (a table works well)
- **Key Takeaways:** 3-5 specific bullets about what is new

Use actual numbers, dates and names from the data. Do not speculate. If you had to
search prior days, say clearly that nothing was found on the target date.

---

## Target Date for Analysis

**Date:** {target_date}{date_note}

Please generate the daily brief for this date."""

DEFAULT_FOCUS = "all federal contract awards"


def resolve_brief_date(target: Optional[str] = None, today: Optional[date] = None) -> ResolvedDate:
    """Target date for the brief; yesterday when not given.

    An unreadable target falls back to today and keeps the warning.
    """
    today = today or date.today()
    if not target:
        return ResolvedDate(format_date(today - timedelta(days=1)))
    return parse_natural_date(target, today=today)


def daily_competitive_brief(
    target_date: Optional[str] = None,
    focus: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """Render the daily brief instructions for one target date."""
    resolved = resolve_brief_date(target_date, today=today)
    return DAILY_BRIEF_PROMPT.format(
        focus=focus or DEFAULT_FOCUS,
        naics_codes=DEFAULT_NAICS_CODES,
        target_date=resolved.value,
        date_note=f"\n\n**Note:** {resolved.warning}" if resolved.warning else "",
    )
