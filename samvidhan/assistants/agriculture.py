"""
samvidhan/assistants/agriculture.py
Farmer and agricultural rights guidance
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import NALSA, complaint_letters, legal_option

KISAN_CALL_CENTRE = {"name": "Kisan Call Centre", "phone": "1800-180-1551", "type": "agriculture"}

# id, name, description, category, urgency, constitutional, legal, timeline, immediate, remedies
_ISSUES = [
    ("farmer_rights", "Farmer Rights", "Rights and protections for farmers and agricultural workers",
     "rights", "high", ["Article 21", "Article 14", "Article 19(1)(g)"], ["Farmer Rights Act", "Agriculture Laws"],
     "30-60 days",
     ["Register on the PM-KISAN portal", "Keep land and crop records updated"],
     ["Complain to the District Agriculture Officer", "Approach the Kisan Call Centre"]),
    ("land_rights", "Land Rights", "Rights to own, use, and transfer agricultural land",
     "rights", "high", ["Article 300A", "Article 14", "Article 21"], ["Land Rights Act", "Land Revenue Laws"],
     "60-120 days",
     ["Get certified copies of land records", "Check mutation entries with the Tehsildar"],
     ["File a revenue appeal", "Claim fair compensation under the Land Acquisition Act 2013"]),
    ("crop_insurance", "Crop Insurance", "Insurance protection for crops against natural calamities",
     "insurance", "medium", ["Article 21", "Article 14"], ["PM Fasal Bima Yojana Guidelines", "Insurance Regulations"],
     "30-60 days",
     ["Report crop loss within 72 hours", "Photograph the damaged crop"],
     ["Escalate to the district grievance committee", "Complain to the insurance ombudsman"]),
    ("agricultural_subsidies", "Agricultural Subsidies", "Government subsidies for agricultural inputs and services",
     "subsidy", "medium", ["Article 21", "Article 14"], ["Subsidy Act", "Agriculture Policies"],
     "30-60 days",
     ["Check eligibility on the scheme portal", "Link Aadhaar with the bank account"],
     ["Raise a grievance on CPGRAMS", "File an RTI on the status of payment"]),
    ("market_access", "Market Access", "Access to agricultural markets and fair pricing",
     "market", "medium", ["Article 21", "Article 14"], ["APMC Acts", "Agriculture Market Laws"],
     "30-60 days",
     ["Register on e-NAM", "Keep sale receipts from the mandi"],
     ["Complain to the market committee secretary"]),
    ("agricultural_labor", "Agricultural Labor", "Rights and protections for agricultural laborers",
     "labor", "medium", ["Article 21", "Article 14", "Article 23"], ["Minimum Wages Act", "MGNREGA"],
     "30-60 days",
     ["Record days worked and wages paid", "Get a MGNREGA job card"],
     ["Complain to the Labour Inspector", "Claim unemployment allowance under MGNREGA"]),
    ("agricultural_technology", "Agricultural Technology", "Access to modern agricultural technology and innovations",
     "technology", "medium", ["Article 21", "Article 14"], ["Seeds Act", "Agriculture Tech Laws"],
     "30-60 days",
     ["Contact the Krishi Vigyan Kendra", "Keep bills for seeds and equipment"],
     ["Complain about spurious seeds to the seed inspector"]),
    ("environmental_protection", "Environmental Protection", "Protection of agricultural environment from pollution",
     "environment", "medium", ["Article 21", "Article 48A"], ["Environment Protection Act", "Insecticides Act"],
     "30-60 days",
     ["Get soil and water tested", "Document the pollution source"],
     ["Complain to the State Pollution Control Board"]),
]

ISSUE_TYPES = [IssueType(*row) for row in _ISSUES]

LEGAL_OPTIONS = {
    "land_rights": {
        "revenue": legal_option("Appeal before the revenue authority", "60-120 days", 65, "Low", "Medium"),
        "civil": legal_option("Civil suit for declaration of title", "365+ days", 60, "High", "High"),
    },
    "default": {
        "department": legal_option("Grievance with the agriculture department", "15-30 days", 65, "None", "Low"),
        "rti": legal_option("RTI application on scheme benefits", "30 days", 80, "Low", "Low"),
        "consumer": legal_option("Consumer complaint for spurious inputs", "90-150 days", 70, "Low", "Medium"),
    },
}

RESOURCES = {
    "portals": [
        {"name": "PM-KISAN", "website": "https://pmkisan.gov.in", "type": "scheme"},
        {"name": "e-NAM", "website": "https://enam.gov.in", "type": "market"},
        {"name": "PM Fasal Bima Yojana", "website": "https://pmfby.gov.in", "type": "insurance"},
    ],
}

CONTACTS = {
    "national": [KISAN_CALL_CENTRE, NALSA],
}

STATISTICS = {
    "totalFarmers": 140000000,
    "successRate": 64,
    "averageResolutionTime": 45,
    "categories": {
        "subsidies": 40,
        "insurance": 25,
        "land": 20,
        "market": 15,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "crop_insurance",
        "title": "Crop Insurance Claim Settled",
        "description": "Claim paid after escalation to the district grievance committee",
        "outcome": "success",
        "date": "2023-12-01",
        "timeline": "45 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article21": {
        "article": "Article 21",
        "title": "Right to livelihood",
        "description": "The right to life includes the right to livelihood",
    },
    "article48": {
        "article": "Article 48",
        "title": "Organisation of agriculture",
        "description": "The State shall organise agriculture on modern and scientific lines",
    },
}

LAWS = [
    {"name": "Right to Fair Compensation in Land Acquisition Act, 2013", "description": "Compensation and rehabilitation for acquired land", "year": 2013},
    {"name": "Seeds Act, 1966", "description": "Quality control of seeds", "year": 1966},
    {"name": "Mahatma Gandhi NREGA, 2005", "description": "Guaranteed rural employment", "year": 2005},
]

TEMPLATES = complaint_letters([
    {
        "type": "scheme",
        "title": "Scheme Benefit Grievance",
        "title_hi": "योजना लाभ संबंधी शिकायत",
        "authority": "District Agriculture Officer",
        "authority_hi": "जिला कृषि अधिकारी",
        "subject": "Non-receipt of benefit under [Scheme]",
        "subject_hi": "[योजना] के अंतर्गत लाभ प्राप्त न होना",
        "law": "the guidelines of the scheme",
    },
])

EXTRAS = {
    "governmentSchemes": [
        {"name": "PM-KISAN", "benefit": "Rs 6,000 per year income support"},
        {"name": "PM Fasal Bima Yojana", "benefit": "Crop insurance at low premium"},
        {"name": "Kisan Credit Card", "benefit": "Short-term credit for farming"},
        {"name": "Soil Health Card", "benefit": "Soil testing and nutrient advice"},
    ],
}

assistant = SectorAssistant(
    slug="agriculture",
    title="Agricultural Rights Assistant",
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
