"""
Hard-coded secondary rosters.

Employers known to publish on each ATS that are not necessarily present in any
tier roster. Keys are the platform board tokens; values carry the company id used
by the tier builder so jobs can be joined back to tier records.
"""

from typing import NamedTuple

from sponsorscout.schemas.job import Platform


class RosterEntry(NamedTuple):
    id: str
    name: str


class WorkdaySite(NamedTuple):
    id: str
    name: str
    domain: str


GREENHOUSE_COMPANIES: dict[str, RosterEntry] = {
    # High volume (500+ jobs)
    "databricks": RosterEntry("DATABRICKS_INC", "Databricks"),
    "coupang": RosterEntry("COUPANG_GLOBAL_LLC", "Coupang"),
    "cloudflare": RosterEntry("CLOUDFLARE_INC", "Cloudflare"),
    "doordashusa": RosterEntry("DOORDASH_INC", "DoorDash"),
    "stripe": RosterEntry("STRIPE_INC", "Stripe"),
    # 200-500 jobs
    "waymo": RosterEntry("WAYMO_LLC", "Waymo"),
    "datadog": RosterEntry("DATADOG_INC", "Datadog"),
    "mongodb": RosterEntry("MONGODB_INC", "MongoDB"),
    "purestorage": RosterEntry("PURE_STORAGE_INC", "Pure Storage"),
    "coinbase": RosterEntry("COINBASE_INC", "Coinbase"),
    "zscaler": RosterEntry("ZSCALER_INC", "Zscaler"),
    "block": RosterEntry("BLOCK_INC", "Block"),
    "hubspotjobs": RosterEntry("HUBSPOT_INC", "HubSpot"),
    "roblox": RosterEntry("ROBLOX_CORPORATION", "Roblox"),
    "airbnb": RosterEntry("AIRBNB_INC", "Airbnb"),
    "roku": RosterEntry("ROKU_INC", "Roku"),
    "rubrik": RosterEntry("RUBRIK_INC", "Rubrik"),
    # 100-200 jobs
    "dropbox": RosterEntry("DROPBOX_INC", "Dropbox"),
    "hitachidigitalservices": RosterEntry("HITACHI_DIGITAL_SERVICES_LLC", "Hitachi Digital Services"),
    "lyft": RosterEntry("LYFT_INC", "Lyft"),
    "pinterest": RosterEntry("PINTEREST_INC", "Pinterest"),
    "robinhood": RosterEntry("ROBINHOOD_MARKETS_INC", "Robinhood"),
    "twilio": RosterEntry("TWILIO_INC", "Twilio"),
    # 50-100 jobs
    "godaddy": RosterEntry("GODADDY_COM_LLC", "GoDaddy"),
    "creditkarma": RosterEntry("CREDIT_KARMA_LLC", "Credit Karma"),
    "linkedin": RosterEntry("LINKEDIN_CORPORATION", "LinkedIn"),
    # 10-50 jobs
    "governmentcareers": RosterEntry("GEICO", "GEICO"),
    "elite": RosterEntry("ELITE_IT_TECHNOLOGIES_LLC", "Elite IT Technologies"),
    "insurance": RosterEntry("INSURANCE_SERVICES_OFFICE_INC", "Insurance Services Office"),
    "ie": RosterEntry("INTERCONTINENTAL_EXCHANGE_HOLDINGS_INC", "Intercontinental Exchange"),
    "iris": RosterEntry("IRIS_SOFTWARE_INC", "Iris Software"),
    "lpl": RosterEntry("LPL_FINANCIAL_LLC", "LPL Financial"),
    "pt": RosterEntry("PALANTIR_TECHNOLOGIES_INC", "Palantir (GH)"),
    "system": RosterEntry("SYSTEM_SOFT_TECHNOLOGIES_LLC", "System Soft Technologies"),
    "si": RosterEntry("SAGE_IT_INC", "Sage IT"),
    "tss": RosterEntry("TOTAL_SYSTEM_SERVICES_LLC", "Total System Services"),
    "bhs": RosterEntry("BEACON_HILL_SOLUTIONS_GROUP_LLC", "Beacon Hill Solutions"),
    "socialfinance": RosterEntry("SOCIAL_FINANCE_LLC", "SoFi"),
    "imt": RosterEntry("ICE_MORTGAGE_TECHNOLOGY_INC", "ICE Mortgage Technology"),
    "nds": RosterEntry("NTT_DATA_SERVICES_LLC", "NTT DATA Services"),
    "cc": RosterEntry("CHARTER_COMMUNICATIONS_INC", "Charter Communications"),
    "fms": RosterEntry("FIS_MANAGEMENT_SERVICES_LLC", "FIS"),
    "ela": RosterEntry("ELI_LILLY_AND_COMPANY", "Eli Lilly"),
    "general": RosterEntry("GENERAL_MOTORS", "General Motors"),
    "indeed": RosterEntry("INDEED_INC", "Indeed"),
    "new": RosterEntry("NEW_YORK_LIFE_INSURANCE_COMPANY", "New York Life"),
    "peopletech": RosterEntry("PEOPLE_TECH_GROUP_INC", "People Tech Group"),
    # Earlier list
    "uber": RosterEntry("UBER_TECHNOLOGIES_INC", "Uber"),
    "reddit": RosterEntry("REDDIT_INC", "Reddit"),
    "figma": RosterEntry("FIGMA_INC", "Figma"),
    "discord": RosterEntry("DISCORD_INC", "Discord"),
    "instacart": RosterEntry("INSTACART_INC", "Instacart"),
    "squarespace": RosterEntry("SQUARESPACE_INC", "Squarespace"),
    "anthropic": RosterEntry("ANTHROPIC_INC", "Anthropic"),
}

LEVER_COMPANIES: dict[str, RosterEntry] = {
    "palantir": RosterEntry("PALANTIR_TECHNOLOGIES_INC", "Palantir"),
    "spotify": RosterEntry("SPOTIFY_USA_INC", "Spotify"),
    "capital": RosterEntry("CAPITAL_ONE_NATIONAL_ASSOCIATION", "Capital One"),
    "metlife": RosterEntry("METLIFE_GROUP_INC", "MetLife"),
    "genesis": RosterEntry("GENESIS_CORP", "Genesis Corp"),
    "linkedin": RosterEntry("LINKEDIN_CORPORATION", "LinkedIn"),
    "atlassian": RosterEntry("ATLASSIAN_US_INC", "Atlassian"),
}

ASHBY_COMPANIES: dict[str, RosterEntry] = {
    "snowflake": RosterEntry("SNOWFLAKE_INC", "Snowflake"),
    "confluent": RosterEntry("CONFLUENT_INC", "Confluent"),
    "cas": RosterEntry("CITADEL_AMERICAS_SERVICES_LLC", "Citadel"),
    "tiger": RosterEntry("TIGER_ANALYTICS_INC", "Tiger Analytics"),
    "eli": RosterEntry("ELI_LILLY_AND_COMPANY", "Eli Lilly"),
    "pure": RosterEntry("PURE_STORAGE_INC", "Pure Storage"),
    "openai": RosterEntry("OPENAI", "OpenAI"),
    "replicate": RosterEntry("REPLICATE", "Replicate"),
    "perplexity": RosterEntry("PERPLEXITY", "Perplexity"),
    "pika": RosterEntry("PIKA", "Pika"),
    "character": RosterEntry("CHARACTER_AI", "Character.ai"),
}

WORKDAY_COMPANIES: dict[str, WorkdaySite] = {
    "salesforce": WorkdaySite("SALESFORCE_INC", "Salesforce", "salesforce.wd12.myworkdayjobs.com"),
    "adobe": WorkdaySite("ADOBE_INC", "Adobe", "adobe.wd5.myworkdayjobs.com"),
    "nvidia": WorkdaySite("NVIDIA_CORPORATION", "NVIDIA", "nvidia.wd5.myworkdayjobs.com"),
    "paypal": WorkdaySite("PAYPAL_INC", "PayPal", "paypal.wd1.myworkdayjobs.com"),
    "vmware": WorkdaySite("VMWARE", "VMware", "vmware.wd1.myworkdayjobs.com"),
    "qualcomm": WorkdaySite("QUALCOMM", "Qualcomm", "qualcomm.wd5.myworkdayjobs.com"),
    "visa": WorkdaySite("VISA", "Visa", "visa.wd5.myworkdayjobs.com"),
    "intuit": WorkdaySite("INTUIT", "Intuit", "intuit.wd1.myworkdayjobs.com"),
    "anduril": WorkdaySite("ANDURIL", "Anduril", "anduril.wd1.myworkdayjobs.com"),
}

SECONDARY_ROSTERS: dict[Platform, dict[str, RosterEntry]] = {
    Platform.GREENHOUSE: GREENHOUSE_COMPANIES,
    Platform.LEVER: LEVER_COMPANIES,
    Platform.ASHBY: ASHBY_COMPANIES,
    Platform.WORKDAY: {
        key: RosterEntry(site.id, site.name) for key, site in WORKDAY_COMPANIES.items()
    },
}
