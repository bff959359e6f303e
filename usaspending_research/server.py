"""FastMCP wiring: tool schemas and prompt registration.

Parameter validation (types, limit bounds, enum membership) lives in the
schemas declared here; handlers assume validated input. Every tool returns
the text produced by ``render_result``.
"""

import logging
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from . import tools
from .client import UsaSpendingClient
from .config import Settings
from .models import SearchFilterSpec
from .prompts import daily_competitive_brief

logger = logging.getLogger(__name__)

Keywords = Annotated[
    Optional[list[str]],
    Field(description="Keywords to search in award descriptions (e.g. ['digital services', 'agile'])"),
]
RecipientName = Annotated[
    Optional[str], Field(description="Contractor/recipient name (e.g. 'Oddball', 'GDIT')")
]
AgencyName = Annotated[
    Optional[str],
    Field(description="Awarding toptier agency name (e.g. 'Department of Veterans Affairs')"),
]
NaicsCodes = Annotated[
    Optional[list[str]],
    Field(description="NAICS codes (e.g. ['541511'] Custom Computer Programming)"),
]
PscCodes = Annotated[
    Optional[list[str]], Field(description="Product Service Codes (e.g. ['D307'] IT strategy)")
]
MinAmount = Annotated[Optional[float], Field(description="Minimum award amount in dollars")]
MaxAmount = Annotated[Optional[float], Field(description="Maximum award amount in dollars")]
AwardTypeCodes = Annotated[
    Optional[list[str]],
    Field(
        description=(
            "Award type codes: A=BPA Call, B=Purchase Order, C=Delivery Order, "
            "D=Definitive Contract. Default is contracts only ['A','B','C','D']"
        )
    ),
]
ActivityStart = Annotated[
    Optional[str],
    Field(
        description=(
            "Start of transaction activity, YYYY-MM-DD or a phrase like '30 days ago'. "
            "Without an end date, searches through today"
        )
    ),
]
ActivityEnd = Annotated[
    Optional[str],
    Field(
        description=(
            "End of transaction activity, YYYY-MM-DD or a phrase like 'today'. "
            "Without a start date, searches from one year ago"
        )
    ),
]
DateRangePhrase = Annotated[
    Optional[str],
    Field(description="Named range such as 'last 30 days', 'last quarter' (overrides start/end)"),
]
FiscalYear = Annotated[
    Optional[int],
    Field(ge=2000, le=2100, description="Federal fiscal year (overrides every other date)"),
]


def build_server(
    settings: Optional[Settings] = None,
    client: Optional[UsaSpendingClient] = None,
) -> FastMCP:
    """Create the MCP server with every tool and prompt registered.

    One fetch client (and so one throttle clock) is shared by all tools. The
    caller that passes ``client`` owns it and closes it; see ``main.serve``.
    """
    settings = settings or Settings()
    client = client or UsaSpendingClient(settings)
    mcp = FastMCP(settings.server_name)

    @mcp.tool(
        name="search_awards",
        description=(
            "Search federal contract awards. Date filtering matches awards with ANY "
            "transaction activity in the range (new awards and modifications). Omit "
            "all dates to search every year. For newly signed awards only, use "
            "search_new_awards."
        ),
    )
    async def search_awards(
        keywords: Keywords = None,
        recipient_name: RecipientName = None,
        agency_name: AgencyName = None,
        naics_codes: NaicsCodes = None,
        psc_codes: PscCodes = None,
        activity_start_date: ActivityStart = None,
        activity_end_date: ActivityEnd = None,
        date_range: DateRangePhrase = None,
        fiscal_year: FiscalYear = None,
        min_amount: MinAmount = None,
        max_amount: MaxAmount = None,
        state: Annotated[
            Optional[str], Field(description="Place of performance state code (e.g. 'VA')")
        ] = None,
        award_type_codes: AwardTypeCodes = None,
        set_aside_types: Annotated[
            Optional[list[str]],
            Field(description="Set-aside codes (e.g. 'SDVOSBC', '8A', 'WOSB')"),
        ] = None,
        extent_competed: Annotated[
            Optional[list[str]],
            Field(description="Extent competed codes (e.g. 'A' full and open, 'CDO')"),
        ] = None,
        contract_pricing_types: Annotated[
            Optional[list[str]],
            Field(description="Pricing type codes (e.g. 'FFPF', 'TM', 'CPFF')"),
        ] = None,
        limit: Annotated[int, Field(ge=1, le=100, description="Results to return")] = 10,
    ) -> str:
        spec = SearchFilterSpec(
            keywords=keywords,
            recipient_name=recipient_name,
            agency_name=agency_name,
            naics_codes=naics_codes,
            psc_codes=psc_codes,
            start_date=activity_start_date,
            end_date=activity_end_date,
            date_range=date_range,
            fiscal_year=fiscal_year,
            min_amount=min_amount,
            max_amount=max_amount,
            state=state,
            award_type_codes=award_type_codes,
            set_aside_types=set_aside_types,
            extent_competed=extent_competed,
            contract_pricing_types=contract_pricing_types,
        )
        return tools.render_result(await tools.search_awards(client, spec, limit=limit))

    @mcp.tool(
        name="search_new_awards",
        description=(
            "Search newly signed contracts by award (action) date. Returns only BASE "
            "awards (modification number 0), never modifications. Use for questions "
            "like 'awards signed yesterday'."
        ),
    )
    async def search_new_awards(
        award_start_date: Annotated[
            str,
            Field(
                min_length=1,
                description="Earliest signing date, YYYY-MM-DD or a phrase like 'yesterday'",
            ),
        ],
        award_end_date: Annotated[
            Optional[str],
            Field(description="Latest signing date; defaults to award_start_date (single day)"),
        ] = None,
        keywords: Keywords = None,
        recipient_name: RecipientName = None,
        agency_name: AgencyName = None,
        naics_codes: NaicsCodes = None,
        psc_codes: PscCodes = None,
        min_amount: MinAmount = None,
        max_amount: MaxAmount = None,
        award_type_codes: AwardTypeCodes = None,
        limit: Annotated[int, Field(ge=1, le=100, description="Transactions to fetch")] = 10,
    ) -> str:
        spec = SearchFilterSpec(
            keywords=keywords,
            recipient_name=recipient_name,
            agency_name=agency_name,
            naics_codes=naics_codes,
            psc_codes=psc_codes,
            min_amount=min_amount,
            max_amount=max_amount,
            award_type_codes=award_type_codes,
        )
        result = await tools.search_new_awards(
            client, award_start_date, award_end_date, spec=spec, limit=limit
        )
        return tools.render_result(result)

    @mcp.tool(
        name="search_transactions",
        description=(
            "Search individual transactions by action date, including modifications. "
            "For new awards only, prefer search_new_awards."
        ),
    )
    async def search_transactions(
        action_start_date: Annotated[
            str,
            Field(min_length=1, description="Earliest action date, YYYY-MM-DD or a natural phrase"),
        ],
        action_end_date: Annotated[
            Optional[str], Field(description="Latest action date; defaults to action_start_date")
        ] = None,
        keywords: Keywords = None,
        recipient_name: RecipientName = None,
        agency_name: AgencyName = None,
        naics_codes: NaicsCodes = None,
        psc_codes: PscCodes = None,
        min_amount: MinAmount = None,
        max_amount: MaxAmount = None,
        award_type_codes: AwardTypeCodes = None,
        limit: Annotated[int, Field(ge=1, le=100, description="Results to return")] = 10,
    ) -> str:
        spec = SearchFilterSpec(
            keywords=keywords,
            recipient_name=recipient_name,
            agency_name=agency_name,
            naics_codes=naics_codes,
            psc_codes=psc_codes,
            min_amount=min_amount,
            max_amount=max_amount,
            award_type_codes=award_type_codes,
        )
        result = await tools.search_transactions(
            client, action_start_date, action_end_date, spec=spec, limit=limit
        )
        return tools.render_result(result)

    @mcp.tool(
        name="get_award_details",
        description="Get detailed information about a specific award",
    )
    async def get_award_details(
        award_id: Annotated[
            str,
            Field(
                description=(
                    "generated_unique_award_id: the 'internalId' from search results "
                    "(e.g. 'CONT_AWD_36C10G22K0075_3600_36C79119D0006_3600'), NOT the PIID"
                )
            ),
        ],
    ) -> str:
        return tools.render_result(await tools.get_award_details(client, award_id))

    @mcp.tool(
        name="search_recipients",
        description="Search contractors/recipients by name to find their recipient hash",
    )
    async def search_recipients(
        search_text: Annotated[str, Field(min_length=1, description="Recipient name to search")],
        limit: Annotated[int, Field(ge=1, le=50, description="Results to return")] = 10,
    ) -> str:
        return tools.render_result(await tools.search_recipients(client, search_text, limit=limit))

    @mcp.tool(
        name="get_recipient_details",
        description="Get a recipient/contractor profile including award totals",
    )
    async def get_recipient_details(
        recipient_hash: Annotated[str, Field(description="Recipient hash from search_recipients")],
    ) -> str:
        return tools.render_result(await tools.get_recipient_details(client, recipient_hash))

    @mcp.tool(
        name="search_idv_awards",
        description=(
            "Find task orders and child awards under an Indefinite Delivery Vehicle "
            "(GWACs, GSA Schedules, BPAs)."
        ),
    )
    async def search_idv_awards(
        award_id: Annotated[str, Field(description="generated_unique_award_id of the IDV")],
        limit: Annotated[int, Field(ge=1, le=100, description="Child awards to return")] = 25,
    ) -> str:
        return tools.render_result(await tools.search_idv_awards(client, award_id, limit=limit))

    @mcp.tool(
        name="get_spending_over_time",
        description=(
            "Spending trends over time grouped by fiscal year, quarter or month. "
            "Follows transaction activity (when money was obligated)."
        ),
    )
    async def get_spending_over_time(
        keywords: Keywords = None,
        recipient_name: RecipientName = None,
        agency_name: AgencyName = None,
        naics_codes: NaicsCodes = None,
        psc_codes: PscCodes = None,
        activity_start_date: ActivityStart = None,
        activity_end_date: ActivityEnd = None,
        date_range: DateRangePhrase = None,
        fiscal_year: FiscalYear = None,
        group: Annotated[
            Literal["fiscal_year", "quarter", "month"], Field(description="Time bucket")
        ] = "fiscal_year",
    ) -> str:
        spec = SearchFilterSpec(
            keywords=keywords,
            recipient_name=recipient_name,
            agency_name=agency_name,
            naics_codes=naics_codes,
            psc_codes=psc_codes,
            start_date=activity_start_date,
            end_date=activity_end_date,
            date_range=date_range,
            fiscal_year=fiscal_year,
        )
        return tools.render_result(await tools.get_spending_over_time(client, spec, group=group))

    @mcp.tool(
        name="analyze_competition",
        description=(
            "Competitive landscape: top recipients, market share and average award "
            "size over a bounded window (defaults to the trailing year)."
        ),
    )
    async def analyze_competition(
        keywords: Keywords = None,
        agency_name: AgencyName = None,
        naics_codes: NaicsCodes = None,
        psc_codes: PscCodes = None,
        activity_start_date: ActivityStart = None,
        activity_end_date: ActivityEnd = None,
        date_range: DateRangePhrase = None,
        fiscal_year: FiscalYear = None,
        min_amount: MinAmount = None,
        limit: Annotated[int, Field(ge=1, le=100, description="Top recipients to show")] = 20,
    ) -> str:
        spec = SearchFilterSpec(
            keywords=keywords,
            agency_name=agency_name,
            naics_codes=naics_codes,
            psc_codes=psc_codes,
            start_date=activity_start_date,
            end_date=activity_end_date,
            date_range=date_range,
            fiscal_year=fiscal_year,
            min_amount=min_amount,
        )
        return tools.render_result(await tools.analyze_competition(client, spec, limit=limit))

    @mcp.prompt(
        name="daily_competitive_brief",
        description="Daily intelligence brief on newly signed federal contract awards",
    )
    def daily_brief(
        date: Annotated[
            Optional[str], Field(description="Target date (YYYY-MM-DD or phrase); default yesterday")
        ] = None,
        focus: Annotated[
            Optional[str], Field(description="Market or agency focus for the brief")
        ] = None,
    ) -> str:
        return daily_competitive_brief(date, focus=focus)

    logger.info(
        "server_built name=%s base_url=%s transport=%s",
        settings.server_name,
        client.base_url,
        settings.transport,
    )
    return mcp
