"""
samvidhan/assistants/housing.py
Housing rights: shelter, tenancy, property and rehabilitation
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import NALSA, STATE_LEGAL_AID, complaint_letters, legal_option

# id, name, description, category, urgency, constitutional, legal, timeline, immediate, remedies
_ISSUES = [
    ("right_to_housing", "Right to Housing", "Fundamental right to adequate housing for all",
     "rights", "high", ["Article 21", "Article 19(1)(e)", "Article 14"], ["Housing Rights Act", "Constitutional Law"],
     "30-60 days",
     ["Keep proof of residence such as ration card and electricity bills", "Get any eviction notice in writing"],
     ["Challenge eviction without notice in the High Court", "Apply under the state rehabilitation policy"]),
    ("landlord_tenant", "Landlord-Tenant Rights", "Rights and protections for tenants and landlords",
     "rights", "medium", ["Article 21", "Article 14"], ["Rent Control Act", "Model Tenancy Act 2021"],
     "30-60 days",
     ["Insist on a registered rent agreement", "Pay rent through traceable methods"],
     ["Approach the Rent Controller", "File a suit for refund of security deposit"]),
    ("property_rights", "Property Rights", "Rights to own, use, and dispose of property",
     "rights", "medium", ["Article 300A", "Article 14", "Article 21"], ["Transfer of Property Act", "Registration Act"],
     "60-120 days",
     ["Verify the title chain and encumbrance certificate", "Keep registered sale deeds safe"],
     ["File a civil suit for possession", "Complain to the police about illegal dispossession"]),
    ("slum_rehabilitation", "Slum Rehabilitation", "Rehabilitation of slum areas with adequate housing",
     "social", "medium", ["Article 21", "Article 14"], ["Slum Rehabilitation Act", "Housing Laws"],
     "60-120 days",
     ["Check your name in the eligibility survey", "Collect proof of residence before the cut-off date"],
     ["Appeal exclusion to the Slum Rehabilitation Authority"]),
    ("affordable_housing", "Affordable Housing", "Access to affordable housing for low-income groups",
     "social", "medium", ["Article 21", "Article 14"], ["PMAY Guidelines", "Housing Policies"],
     "30-60 days",
     ["Apply on the PMAY portal", "Keep the application reference number"],
     ["Raise a grievance with the urban local body"]),
    ("housing_discrimination", "Housing Discrimination", "Protection against discrimination in housing",
     "rights", "high", ["Article 14", "Article 15"], ["Anti-discrimination Laws", "Housing Regulations"],
     "30-60 days",
     ["Record the refusal and the reason given"],
     ["Complain to the State Human Rights Commission", "File a writ petition for discriminatory allotment"]),
    ("infrastructure", "Housing Infrastructure", "Right to safe and adequate housing infrastructure",
     "infrastructure", "medium", ["Article 21", "Article 14"], ["Building Regulations", "Infrastructure Standards"],
     "30-60 days",
     ["Photograph structural defects and water logging"],
     ["Complain to the municipal corporation", "File a RERA complaint for builder defects"]),
    ("housing_finance", "Housing Finance", "Access to housing finance and mortgage facilities",
     "finance", "medium", ["Article 21", "Article 19(1)(g)"], ["National Housing Bank Act", "Banking Regulations"],
     "60-120 days",
     ["Compare loan offers and keep sanction letters"],
     ["Complain to the National Housing Bank", "Approach the RBI ombudsman"]),
]

ISSUE_TYPES = [IssueType(*row) for row in _ISSUES]

LEGAL_OPTIONS = {
    "landlord_tenant": {
        "rent_controller": legal_option("Application before the Rent Controller", "30-90 days", 70, "Low", "Medium"),
        "civil": legal_option("Civil suit for deposit refund", "180-365 days", 65, "Medium", "High"),
    },
    "default": {
        "authority": legal_option("Complaint to the housing or municipal authority", "30-60 days", 60, "None", "Low"),
        "writ": legal_option("Writ petition in the High Court", "90-180 days", 65, "High", "High"),
        "legal_aid": legal_option("Free lawyer through the Legal Services Authority", "7-14 days", 75, "None", "Low"),
    },
}

RESOURCES = {
    "portals": [
        {"name": "Pradhan Mantri Awas Yojana", "website": "https://pmaymis.gov.in", "type": "scheme"},
        {"name": "National Housing Bank", "website": "https://nhb.org.in", "type": "finance"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "PMAY Helpline", "phone": "1800-11-6163", "type": "housing"},
        NALSA,
    ],
    **STATE_LEGAL_AID,
}

STATISTICS = {
    "totalCases": 110000,
    "successRate": 58,
    "averageResolutionTime": 70,
    "categories": {
        "tenancy": 45000,
        "eviction": 25000,
        "property": 30000,
        "finance": 10000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "right_to_housing",
        "title": "Eviction Stayed",
        "description": "High Court stayed demolition until rehabilitation was offered",
        "outcome": "success",
        "date": "2023-11-30",
        "timeline": "10 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article21": {
        "article": "Article 21",
        "title": "Right to shelter",
        "description": "The right to life includes the right to livelihood and shelter",
    },
    "article19": {
        "article": "Article 19(1)(e)",
        "title": "Freedom to reside and settle",
        "description": "Every citizen may reside and settle in any part of India",
    },
    "landmark": {
        "case": "Olga Tellis v. Bombay Municipal Corporation (1985)",
        "description": "Eviction of pavement dwellers must follow fair procedure",
    },
}

LAWS = [
    {"name": "Model Tenancy Act, 2021", "description": "Framework for rent authorities and tenancy agreements", "year": 2021},
    {"name": "Real Estate (Regulation and Development) Act, 2016", "description": "Protection of home buyers", "year": 2016},
]

TEMPLATES = complaint_letters([
    {
        "type": "eviction",
        "title": "Representation against Eviction",
        "title_hi": "बेदखली के विरुद्ध अभ्यावेदन",
        "authority": "Municipal Commissioner",
        "authority_hi": "नगर आयुक्त",
        "subject": "Request to halt eviction and provide rehabilitation",
        "subject_hi": "बेदखली रोकने और पुनर्वास प्रदान करने का अनुरोध",
        "law": "Article 21 of the Constitution",
    },
])

EXTRAS = {
    "governmentSchemes": [
        {"name": "Pradhan Mantri Awas Yojana (Urban)", "benefit": "Interest subsidy and housing for EWS/LIG"},
        {"name": "Pradhan Mantri Awas Yojana (Gramin)", "benefit": "Assistance for pucca houses in rural areas"},
    ],
}

assistant = SectorAssistant(
    slug="housing",
    title="Housing Rights Assistant",
    type_field="rightsType",
    issue_types=ISSUE_TYPES,
    legal_options=LEGAL_OPTIONS,
    resources=RESOURCES,
    contacts=CONTACTS,
    statistics=STATISTICS,
    recent_cases=RECENT_CASES,
    constitutional_basis=CONSTITUTIONAL_BASIS,
    laws=LAWS,
    templates=TEMPLATES,
    extras=EXTRAS,
)
