"""
samvidhan/assistants/business.py
Business rights under Article 19(1)(g); also served as /business-rights
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import CONSUMER_HELPLINE, complaint_letters, legal_option

TRADE = ["Article 19(1)(g)", "Article 14", "Article 21"]

# id, name, description, category, urgency, constitutional, legal, timeline, immediate, remedies
_ISSUES = [
    ("business_registration", "Business Registration", "Business registration and incorporation processes",
     "registration", "medium", TRADE, ["Companies Act", "Shops and Establishments Acts"], "30-60 days",
     ["Reserve the name on the MCA portal", "Get Udyam registration for MSMEs"],
     ["Raise a grievance with the Registrar of Companies"]),
    ("business_operations", "Business Operations", "Business operations and management compliance",
     "operations", "medium", TRADE, ["Business Laws", "Operational Regulations"], "30-60 days",
     ["Keep licences and renewals in one register"],
     ["Appeal licence refusals to the appellate authority"]),
    ("intellectual_property", "Intellectual Property", "IP rights and protection for businesses",
     "ip", "medium", TRADE, ["Trade Marks Act", "Patents Act", "Copyright Act"], "30-60 days",
     ["File trademark application early", "Keep evidence of first use"],
     ["Send a cease and desist notice", "File an infringement suit"]),
    ("consumer_protection", "Consumer Protection", "Consumer rights and protection in business",
     "consumer", "medium", TRADE, ["Consumer Protection Act", "Legal Metrology Act"], "30-60 days",
     ["Publish a clear refund policy"],
     ["Respond to consumer notices within the deadline"]),
    ("labor_rights", "Labor Rights", "Labor rights and protections for workers",
     "labor", "medium", TRADE, ["Labour Codes", "Employment Regulations"], "30-60 days",
     ["Register for EPF and ESI where applicable"],
     ["Approach the Labour Commissioner for conciliation"]),
    ("tax_rights", "Tax Rights", "Tax rights and compliance for businesses",
     "tax", "medium", TRADE, ["GST Act", "Income Tax Act"], "30-60 days",
     ["Reply to notices within the time allowed", "Keep invoices and returns reconciled"],
     ["File an appeal before the appellate authority", "Use the taxpayer grievance portal"]),
    ("environmental_compliance", "Environmental Compliance", "Environmental compliance for businesses",
     "environment", "medium", ["Article 21", "Article 14", "Article 19(1)(g)"], ["Environment Protection Act", "Consent to Operate Rules"], "30-60 days",
     ["Obtain consent to establish and operate"],
     ["Appeal refusals before the appellate authority"]),
    ("foreign_investment", "Foreign Investment", "Foreign investment rights and protections",
     "investment", "medium", TRADE, ["FEMA 1999", "FDI Policy"], "30-60 days",
     ["Check the sectoral cap and approval route"],
     ["Approach the Foreign Investment Facilitation Portal"]),
]

ISSUE_TYPES = [IssueType(*row) for row in _ISSUES]

LEGAL_OPTIONS = {
    "default": {
        "msme_council": legal_option("Delayed payment claim before the MSME Facilitation Council", "90 days", 70, "Low", "Medium"),
        "arbitration": legal_option("Arbitration under the contract", "180-365 days", 65, "High", "High"),
        "commercial_court": legal_option("Suit in the Commercial Court", "365+ days", 60, "High", "High"),
    },
}

RESOURCES = {
    "portals": [
        {"name": "Ministry of Corporate Affairs", "website": "https://www.mca.gov.in", "type": "registration"},
        {"name": "Udyam Registration", "website": "https://udyamregistration.gov.in", "type": "msme"},
        {"name": "MSME Samadhaan", "website": "https://samadhaan.msme.gov.in", "type": "payments"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "MSME Champions Helpline", "phone": "1800-180-6763", "type": "msme"},
        CONSUMER_HELPLINE,
    ],
}

STATISTICS = {
    "totalBusinesses": 63000000,
    "successRate": 66,
    "averageResolutionTime": 90,
    "categories": {
        "registration": 30,
        "payments": 25,
        "tax": 25,
        "ip": 20,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "business_operations",
        "title": "Delayed Payment Recovered",
        "description": "MSME Council ordered payment with compound interest",
        "outcome": "success",
        "date": "2023-12-06",
        "timeline": "80 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article19": {
        "article": "Article 19(1)(g)",
        "title": "Freedom of trade",
        "description": "Every citizen may practise any profession or carry on any occupation, trade or business",
    },
    "article14": {
        "article": "Article 14",
        "title": "Equality before law",
        "description": "Licensing and tendering must not be arbitrary",
    },
}

LAWS = [
    {"name": "Companies Act, 2013", "description": "Incorporation and governance of companies", "year": 2013},
    {"name": "MSMED Act, 2006", "description": "Protection against delayed payments to MSMEs", "year": 2006},
    {"name": "Central Goods and Services Tax Act, 2017", "description": "Goods and services tax", "year": 2017},
]

TEMPLATES = complaint_letters([
    {
        "type": "delayed_payment",
        "title": "Delayed Payment Reference",
        "title_hi": "विलंबित भुगतान संदर्भ",
        "authority": "Micro and Small Enterprises Facilitation Council",
        "authority_hi": "सूक्ष्म एवं लघु उद्यम सुविधा परिषद",
        "subject": "Reference for recovery of delayed payment from [Buyer]",
        "subject_hi": "[क्रेता] से विलंबित भुगतान की वसूली हेतु संदर्भ",
        "law": "Section 18 of the MSMED Act 2006",
    },
])

EXTRAS = {
    "governmentSchemes": [
        {"name": "Startup India", "benefit": "Tax exemptions and self-certification"},
        {"name": "PM Mudra Yojana", "benefit": "Collateral-free loans up to Rs 10 lakh"},
        {"name": "Credit Guarantee Scheme for MSEs", "benefit": "Guarantee cover for business loans"},
    ],
}

assistant = SectorAssistant(
    slug="business",
    title="Business Rights Assistant",
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
    aliases=("business-rights",),
)
