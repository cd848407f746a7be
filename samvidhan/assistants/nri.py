"""
samvidhan/assistants/nri.py
Rights of non-resident Indians; also served as /nri-rights.
Local contacts are keyed by country of residence.
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import complaint_letters, legal_option

TRADE = ["Article 19(1)(g)", "Article 14", "Article 21"]
LIFE = ["Article 21", "Article 14", "Article 19(1)(g)"]

# id, name, description, category, urgency, constitutional, legal, timeline, immediate, remedies
_ISSUES = [
    ("nri_investment", "NRI Investment", "NRI investment and financial services",
     "investment", "medium", TRADE, ["FEMA 1999", "Foreign Investment Laws"], "30-60 days",
     ["Invest through NRE/NRO accounts", "Keep FIRC and bank certificates"],
     ["Complain to SEBI SCORES for securities issues"]),
    ("nri_property", "NRI Property", "NRI property and real estate investments",
     "property", "medium", TRADE, ["FEMA 1999", "Real Estate Laws"], "30-60 days",
     ["Register a power of attorney only with a trusted person", "Get the property mutated in your name"],
     ["File a complaint with the NRI cell of the state police", "File a civil suit through an attorney"]),
    ("nri_banking", "NRI Banking", "NRI banking and financial services",
     "banking", "medium", TRADE, ["FEMA 1999", "Banking Regulations"], "30-60 days",
     ["Convert resident accounts to NRO after moving abroad"],
     ["Escalate to the RBI ombudsman"]),
    ("nri_taxation", "NRI Taxation", "NRI taxation and financial compliance",
     "tax", "medium", TRADE, ["Income Tax Act 1961", "DTAA"], "30-60 days",
     ["Get a Tax Residency Certificate", "Claim DTAA relief when filing"],
     ["File an appeal before the Commissioner (Appeals)"]),
    ("nri_education", "NRI Education", "NRI education and educational services",
     "education", "medium", TRADE, ["NRI Quota Rules", "Education Laws"], "30-60 days",
     ["Check NRI quota eligibility documents"],
     ["Complain to the admission regulatory authority"]),
    ("nri_healthcare", "NRI Healthcare", "NRI healthcare and medical services",
     "healthcare", "high", LIFE, ["Clinical Establishments Act", "Healthcare Laws"], "30-60 days",
     ["Carry medical records and insurance details"],
     ["Complain to the hospital grievance cell"]),
    ("nri_consular", "NRI Consular", "NRI consular services and diplomatic protection",
     "consular", "high", LIFE, ["Passports Act 1967", "Emigration Act 1983"], "30-60 days",
     ["Register with the Indian mission", "Keep copies of passport and visa"],
     ["Lodge a grievance on MADAD", "Seek help from the Indian Community Welfare Fund"]),
    ("nri_retirement", "NRI Retirement", "NRI retirement and pension services",
     "retirement", "medium", LIFE, ["EPF Scheme", "Pension Rules"], "30-60 days",
     ["Submit the digital life certificate on time"],
     ["Raise a grievance on CPENGRAMS"]),
]

ISSUE_TYPES = [IssueType(*row) for row in _ISSUES]

LEGAL_OPTIONS = {
    "nri_property": {
        "police": legal_option("Complaint to the state NRI cell", "15-30 days", 60, "None", "Low"),
        "civil": legal_option("Civil suit through a power of attorney holder", "365+ days", 65, "High", "High"),
    },
    "default": {
        "madad": legal_option("Grievance on the MADAD consular portal", "7-30 days", 70, "None", "Low"),
        "ombudsman": legal_option("Complaint to the relevant ombudsman", "30-60 days", 65, "None", "Low"),
    },
}

RESOURCES = {
    "portals": [
        {"name": "MADAD", "website": "https://madad.gov.in", "type": "consular"},
        {"name": "e-Migrate", "website": "https://emigrate.gov.in", "type": "emigration"},
        {"name": "Income Tax e-Filing", "website": "https://www.incometax.gov.in", "type": "tax"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "Pravasi Bharatiya Sahayata Kendra", "phone": "1800-11-3090", "type": "consular"},
    ],
    "usa": [{"name": "Embassy of India, Washington DC", "phone": "+1-202-939-7000", "type": "embassy"}],
    "uk": [{"name": "High Commission of India, London", "phone": "+44-20-7836-8484", "type": "embassy"}],
    "uae": [{"name": "Embassy of India, Abu Dhabi", "phone": "+971-2-4492700", "type": "embassy"}],
    "canada": [{"name": "High Commission of India, Ottawa", "phone": "+1-613-744-3751", "type": "embassy"}],
    "singapore": [{"name": "High Commission of India, Singapore", "phone": "+65-6737-6777", "type": "embassy"}],
}

STATISTICS = {
    "totalNRIs": 13500000,
    "successRate": 70,
    "averageResolutionTime": 45,
    "categories": {
        "property": 35,
        "consular": 25,
        "tax": 20,
        "banking": 20,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "nri_property",
        "title": "Encroachment Removed",
        "description": "State NRI cell helped recover possession of ancestral property",
        "outcome": "success",
        "date": "2023-11-22",
        "timeline": "4 months",
    },
]

CONSTITUTIONAL_BASIS = {
    "article14": {
        "article": "Article 14",
        "title": "Equality before law",
        "description": "Applies to every person within India, including NRIs",
    },
    "article21": {
        "article": "Article 21",
        "title": "Protection of life and personal liberty",
        "description": "Includes the right to travel abroad and return",
    },
}

LAWS = [
    {"name": "Foreign Exchange Management Act, 1999", "description": "Accounts, investment and property for NRIs", "year": 1999},
    {"name": "Emigration Act, 1983", "description": "Protection of emigrant workers", "year": 1983},
]

TEMPLATES = complaint_letters([
    {
        "type": "nri_cell",
        "title": "Complaint to NRI Cell",
        "title_hi": "एनआरआई प्रकोष्ठ को शिकायत",
        "authority": "Superintendent of Police, NRI Cell",
        "authority_hi": "पुलिस अधीक्षक, एनआरआई प्रकोष्ठ",
        "subject": "Complaint regarding encroachment on property at [Address]",
        "subject_hi": "[पता] स्थित संपत्ति पर अतिक्रमण के संबंध में शिकायत",
        "law": "the Indian Penal Code and the Transfer of Property Act",
    },
])

EXTRAS = {
    "embassies": [
        entry
        for country, entries in CONTACTS.items()
        if country != "national"
        for entry in entries
    ],
}

assistant = SectorAssistant(
    slug="nri",
    title="NRI Rights Assistant",
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
    aliases=("nri-rights",),
    location_param="country",
    location_field="country",
)
