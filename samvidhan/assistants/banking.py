"""
samvidhan/assistants/banking.py
Banking rights navigator
"""
from samvidhan.assistants.base import IssueType, SectorAssistant
from samvidhan.assistants.common import NATIONAL_EMERGENCY, CYBER_CRIME, complaint_letters, legal_option

BANKING_LAWS = ["Banking Regulation Act 1949", "RBI Integrated Ombudsman Scheme 2021"]

ISSUE_TYPES = [
    IssueType(
        id="account",
        name="Account Issues",
        description="Account opening, closure, balance issues, unauthorized access",
        category="account",
        urgency="medium",
        constitutional=["Article 14", "Article 19(1)(g)"],
        legal=BANKING_LAWS,
        timeline="30-60 days",
        immediate=[
            "Document account issues with screenshots",
            "Stop automatic payments if needed",
            "Secure account credentials",
            "Contact bank customer service immediately",
        ],
        remedies=[
            "File complaint with banking ombudsman",
            "Send legal notice to bank",
            "Prepare for consumer court case",
        ],
        milestones={
            "0-3 days": "Contact bank, document issues",
            "7-30 days": "File ombudsman complaint",
            "30-60 days": "Send legal notice",
            "60+ days": "File consumer court case",
        },
        subject="account",
    ),
    IssueType(
        id="transaction",
        name="Transaction Problems",
        description="Payment failures, unauthorized transactions, processing delays",
        category="transaction",
        urgency="high",
        constitutional=["Article 14", "Article 21"],
        legal=["Payment and Settlement Systems Act 2007"] + BANKING_LAWS,
        timeline="7-14 days",
        immediate=[
            "Document transaction details",
            "Preserve receipts and statements",
            "Contact merchant/bank immediately",
            "Stop payment if possible",
        ],
        remedies=[
            "File chargeback request",
            "File dispute with bank",
            "Send legal notice for unauthorized transaction",
        ],
        milestones={
            "0-2 days": "Contact bank/merchant",
            "7-14 days": "File chargeback/dispute",
            "15-30 days": "Send legal notice",
            "30+ days": "File court case",
        },
        stages={
            "report": "0-2 days",
            "dispute": "7-14 days",
            "reversal": "10-20 days",
            "escalation": "30-60 days",
        },
        subject="transaction",
    ),
    IssueType(
        id="loan",
        name="Loan Issues",
        description="Loan approval, interest rates, harassment, foreclosure",
        category="loan",
        urgency="high",
        constitutional=["Article 14", "Article 21"],
        legal=["RBI Fair Practices Code for Lenders"] + BANKING_LAWS,
        timeline="30-60 days",
        immediate=[
            "Document loan agreement",
            "Preserve payment receipts",
            "Record calls from recovery agents",
            "Contact loan officer immediately",
        ],
        remedies=[
            "File complaint with banking ombudsman",
            "Send legal notice to bank",
            "File police complaint against recovery harassment",
        ],
        subject="loan",
    ),
    IssueType(
        id="card",
        name="Card Issues",
        description="Unauthorized charges, card blocking, liability disputes",
        category="card",
        urgency="high",
        constitutional=["Article 14", "Article 21"],
        legal=["RBI Limiting Liability of Customers Circular 2017"] + BANKING_LAWS,
        timeline="3-7 days",
        immediate=[
            "Block the card through the bank app or helpline",
            "Report unauthorized charges within 3 days",
            "Keep the complaint reference number",
        ],
        remedies=[
            "Claim zero liability for third-party fraud",
            "File chargeback with card issuer",
            "Escalate to banking ombudsman",
        ],
        stages={
            "block_card": "0-1 days",
            "report": "1-3 days",
            "shadow_credit": "7-10 days",
            "resolution": "30-90 days",
        },
        subject="card",
    ),
    IssueType(
        id="fraud",
        name="Banking Fraud",
        description="Identity theft, phishing, account takeover, financial fraud",
        category="fraud",
        urgency="urgent",
        constitutional=["Article 21", "Article 14"],
        legal=["Information Technology Act 2000", "IPC Section 420"] + BANKING_LAWS,
        timeline="1-3 days",
        immediate=[
            "Call 1930 to freeze the money trail",
            "Block all cards and net banking",
            "File a report on cybercrime.gov.in",
            "Inform the bank in writing",
        ],
        remedies=[
            "File FIR with the cyber cell",
            "Claim reversal under RBI liability rules",
            "Escalate to banking ombudsman",
        ],
        milestones={
            "0-1 days": "Report on 1930 and block accounts",
            "1-3 days": "FIR and written bank complaint",
            "10-90 days": "Investigation and reversal",
        },
        stages={
            "report": "0-1 days",
            "fir": "1-3 days",
            "investigation": "10-90 days",
        },
        subject="fraud",
    ),
    IssueType(
        id="charges",
        name="Banking Charges",
        description="Excessive fees, hidden charges, illegal deductions",
        category="charges",
        urgency="medium",
        constitutional=["Article 14"],
        legal=BANKING_LAWS,
        timeline="30-60 days",
        immediate=[
            "Download statements showing the charges",
            "Compare against the bank's published schedule of charges",
            "Request reversal in writing",
        ],
        remedies=[
            "File complaint with banking ombudsman",
            "File consumer complaint for deficiency in service",
        ],
        subject="bank charges",
    ),
]

LEGAL_OPTIONS = {
    "account": {
        "negotiation": legal_option("Negotiate with bank for resolution", "7-14 days", 65, "None", "Low"),
        "ombudsman": legal_option("File complaint with Banking Ombudsman", "30-60 days", 80, "None", "Low"),
        "legal": legal_option("Send legal notice to bank", "15-30 days", 75, "Medium", "Medium"),
        "court": legal_option("File case in Consumer Court", "60-120 days", 85, "High", "High"),
    },
    "transaction": {
        "chargeback": legal_option("File chargeback with card issuer", "3-7 days", 70, "None", "Low"),
        "dispute": legal_option("File dispute with bank", "7-14 days", 60, "None", "Low"),
        "legal": legal_option("Send legal notice for unauthorized transaction", "15-30 days", 80, "Medium", "Medium"),
        "court": legal_option("File case in Consumer Court", "45-90 days", 85, "High", "High"),
    },
    "fraud": {
        "police": legal_option("File FIR with the cyber cell", "1-3 days", 55, "None", "Medium"),
        "bank": legal_option("Claim reversal from the bank", "10-90 days", 75, "None", "Low"),
        "ombudsman": legal_option("File complaint with Banking Ombudsman", "30-60 days", 70, "None", "Low"),
    },
    "default": {
        "ombudsman": legal_option("File complaint with Banking Ombudsman", "30-60 days", 75, "None", "Low"),
        "court": legal_option("File case in Consumer Court", "60-120 days", 80, "High", "High"),
    },
}

RESOURCES = {
    "regulators": [
        {"name": "RBI Complaint Management System", "website": "https://cms.rbi.org.in", "type": "ombudsman"},
        {"name": "National Cyber Crime Reporting Portal", "website": "https://cybercrime.gov.in", "type": "cyber"},
    ],
    "guides": [
        {"name": "RBI Customer Rights Charter", "website": "https://rbi.org.in", "type": "guide"},
    ],
}

CONTACTS = {
    "national": [
        {"name": "Banking Ombudsman", "phone": "1800-425-0019", "type": "ombudsman"},
        CYBER_CRIME,
        NATIONAL_EMERGENCY,
    ],
    "sbi": [{"name": "State Bank of India Customer Care", "phone": "1800-1234", "type": "bank"}],
    "hdfc": [{"name": "HDFC Bank PhoneBanking", "phone": "1800-202-6161", "type": "bank"}],
    "icici": [{"name": "ICICI Bank Customer Care", "phone": "1800-1080", "type": "bank"}],
    "pnb": [{"name": "Punjab National Bank Customer Care", "phone": "1800-180-2222", "type": "bank"}],
}

STATISTICS = {
    "totalIssues": 180000,
    "successRate": 72,
    "averageResolutionTime": 35,
    "compensation": 8500000,
    "categories": {
        "account": 50000,
        "transaction": 45000,
        "loan": 35000,
        "card": 25000,
        "fraud": 15000,
        "charges": 10000,
    },
}

RECENT_CASES = [
    {
        "id": 1,
        "type": "transaction",
        "title": "Unauthorized Transaction Reversed",
        "bank": "Nationalized Bank",
        "description": "Bank reversed unauthorized transaction within 5 days",
        "outcome": "success",
        "compensation": 2500,
        "date": "2023-12-20",
        "timeline": "5 days",
    },
    {
        "id": 2,
        "type": "card",
        "title": "Fraudulent Charges Refunded",
        "bank": "Private Bank",
        "description": "Bank refunded fraudulent charges after investigation",
        "outcome": "success",
        "compensation": 5000,
        "date": "2023-12-18",
        "timeline": "10 days",
    },
    {
        "id": 3,
        "type": "loan",
        "title": "Loan Harassment Stopped",
        "bank": "NBFC",
        "description": "Bank stopped loan harassment after legal notice",
        "outcome": "success",
        "compensation": 0,
        "date": "2023-12-15",
        "timeline": "20 days",
    },
]

CONSTITUTIONAL_BASIS = {
    "article14": {
        "article": "Article 14",
        "title": "Equality before law",
        "description": "Banks acting as public institutions must treat customers fairly and without arbitrariness",
    },
    "article21": {
        "article": "Article 21",
        "title": "Protection of life and personal liberty",
        "description": "Coercive recovery practices violate the right to live with dignity",
    },
}

LAWS = [
    {"name": "Banking Regulation Act, 1949", "description": "Comprehensive regulation of banking operations in India", "authority": "Reserve Bank of India", "year": 1949},
    {"name": "Payment and Settlement Systems Act, 2007", "description": "Regulates payment systems and settlement systems", "authority": "Reserve Bank of India", "year": 2007},
    {"name": "Credit Information Companies (Regulation) Act, 2005", "description": "Regulates credit information bureaus and credit reporting", "authority": "Reserve Bank of India", "year": 2005},
    {"name": "Foreign Exchange Management Act, 1999", "description": "Regulates foreign exchange transactions", "authority": "Reserve Bank of India", "year": 1999},
]

TEMPLATES = complaint_letters([
    {
        "type": "ombudsman",
        "title": "Complaint to Banking Ombudsman",
        "title_hi": "बैंकिंग लोकपाल को शिकायत",
        "authority": "Banking Ombudsman, Reserve Bank of India",
        "authority_hi": "बैंकिंग लोकपाल, भारतीय रिज़र्व बैंक",
        "subject": "Complaint against [Bank Name] for deficiency in service",
        "subject_hi": "[बैंक का नाम] के विरुद्ध सेवा में कमी की शिकायत",
        "law": "the RBI Integrated Ombudsman Scheme 2021",
    },
    {
        "type": "unauthorized_transaction",
        "title": "Unauthorized Transaction Complaint",
        "title_hi": "अनधिकृत लेनदेन की शिकायत",
        "authority": "Branch Manager",
        "authority_hi": "शाखा प्रबंधक",
        "subject": "Reversal of unauthorized debit from account [Account Number]",
        "subject_hi": "खाता [खाता संख्या] से अनधिकृत निकासी की वापसी",
        "law": "the RBI circular on limiting liability of customers",
    },
])

EXTRAS = {
    "hotlines": [
        {"name": "Reserve Bank of India", "phone": "011-2338225", "category": "regulatory", "is247": False},
        {"name": "Banking Ombudsman", "phone": "1800-425-0019", "category": "dispute", "is247": False},
        {"name": "Cyber Crime Helpline", "phone": "1930", "category": "security", "is247": True},
        {"name": "National Helpline", "phone": "112", "category": "emergency", "is247": True},
    ],
    "regulations": LAWS,
}

assistant = SectorAssistant(
    slug="banking",
    title="Banking Rights Navigator",
    type_field="issueType",
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
    location_param="bank",
    location_field="bankName",
)
