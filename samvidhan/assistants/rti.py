"""
samvidhan/assistants/rti.py
Right to Information application drafting and department directory
"""
import logging
import random
from datetime import datetime, timezone
from typing import List, Optional

from samvidhan.errors import BadRequestError, ErrorCode
from samvidhan.services.localization import pick_language

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Missing required fields: applicant name, address, department, and subject"

ESTIMATED_DAYS = {
    "urgent": 5,
    "priority": 10,
    "normal": 30,
}

STANDARD_FEES = "Rs. 10/- for BPL category, Rs. 50/- for others"

TEMPLATES = {
    "en": {
        "header": "RIGHT TO INFORMATION ACT, 2005",
        "subheader": "Application under Section 6(1) of the RTI Act, 2005",
        "applicant": "Name of Applicant: {name}",
        "address": "Address: {address}",
        "department": "Public Authority: {department}",
        "subject": "Particulars of Information Required: {subject}",
        "description": "Description of Information Required: {description}",
        "period": "Period to which information relates: {period_from} to {period_to}",
        "constitution": (
            "This application is made under the constitutional right to information "
            "as upheld by the Supreme Court in various judgments."
        ),
        "signature": "Signature of Applicant: _____________________",
        "date": "Date: {date}",
    },
    "hi": {
        "header": "सूचना का अधिकार अधिनियम, 2005",
        "subheader": "सूचना का अधिकार अधिनियम, 2005 की धारा 6(1) के तहत आवेदन",
        "applicant": "आवेदक का नाम: {name}",
        "address": "पता: {address}",
        "department": "सार्वजनिक प्राधिकरण: {department}",
        "subject": "आवश्यक जानकारी के विवरण: {subject}",
        "description": "आवश्यक जानकारी का विवरण: {description}",
        "period": "जानकारी अवधि: {period_from} से {period_to}",
        "constitution": "यह आवेदन संविधान के तहत सूचना के अधिकार के तहत किया गया है।",
        "signature": "आवेदक के हस्ताक्षर: _____________________",
        "date": "दिनांक: {date}",
    },
}

# line order of the rendered application; blank strings are paragraph breaks
LAYOUT = [
    "header", "", "subheader", "", "applicant", "address", "", "department", "",
    "subject", "", "description", "", "period", "", "constitution", "", "signature", "", "date",
]

DEPARTMENT_INFO = {
    "Ministry of Home Affairs": {
        "address": "North Block, Central Secretariat, New Delhi - 110001",
        "phone": "011-2338225",
        "email": "mha@gov.in",
        "website": "https://mha.gov.in",
        "cpio": "Joint Secretary (RTI)",
        "firstAppellate": "Additional Secretary",
        "fees": STANDARD_FEES,
    },
    "Ministry of Finance": {
        "address": "North Block, Central Secretariat, New Delhi - 110001",
        "phone": "011-2309243",
        "email": "finmin@nic.in",
        "website": "https://finmin.gov.in",
        "cpio": "Joint Secretary (Budget)",
        "firstAppellate": "Additional Secretary",
        "fees": STANDARD_FEES,
    },
    "Supreme Court of India": {
        "address": "Supreme Court of India, Tilak Marg, New Delhi - 110201",
        "phone": "011-23388025",
        "email": "sci@nic.in",
        "website": "https://sci.gov.in",
        "cpio": "Registrar (RTI)",
        "firstAppellate": "Registrar (RTI)",
        "fees": STANDARD_FEES,
    },
    "Delhi Police": {
        "address": "Police Headquarters, Delhi Police, ITO, Delhi - 110002",
        "phone": "011-2341000",
        "email": "delhi.police@gov.in",
        "website": "https://delhipolice.gov.in",
        "cpio": "Joint Commissioner (RTI)",
        "firstAppellate": "Joint Commissioner (RTI)",
        "fees": STANDARD_FEES,
    },
}

GENERIC_DEPARTMENT = {
    "address": "Department Address",
    "phone": "Contact Number",
    "email": "department@email.com",
    "website": "https://department.gov.in",
    "cpio": "CPIO Name",
    "firstAppellate": "First Appellate Authority",
    "fees": "Rs. 50/-",
}

DEPARTMENT_DIRECTORY = [
    {
        "name": "Ministry of Home Affairs",
        "category": "central",
        "level": "ministry",
        "address": "North Block, Central Secretariat, New Delhi - 110001",
        "phone": "011-2338225",
        "email": "mha@gov.in",
        "website": "https://mha.gov.in",
        "jurisdiction": "National Security, Internal Security",
    },
    {
        "name": "Ministry of Finance",
        "category": "central",
        "level": "ministry",
        "address": "North Block, Central Secretariat, New Delhi - 110001",
        "phone": "011-2309243",
        "email": "finmin@nic.in",
        "website": "https://finmin.gov.in",
        "jurisdiction": "Finance, Economic Affairs",
    },
    {
        "name": "Ministry of Health and Family Welfare",
        "category": "central",
        "level": "ministry",
        "address": "Nirman Bhavan, Maulana Azad Road, New Delhi - 110001",
        "phone": "011-23061302",
        "email": "mohfw@nic.in",
        "website": "https://mohfw.gov.in",
        "jurisdiction": "Healthcare, Family Welfare",
    },
    {
        "name": "Ministry of Education",
        "category": "central",
        "level": "ministry",
        "address": "Shastri Bhavan, Dr. Rajendra Prasad Road, New Delhi - 110001",
        "phone": "011-26156583",
        "email": "edu@nic.in",
        "website": "https://education.gov.in",
        "jurisdiction": "Education, Literacy",
    },
    {
        "name": "Supreme Court of India",
        "category": "judiciary",
        "level": "supreme",
        "address": "Supreme Court of India, Tilak Marg, New Delhi - 110201",
        "phone": "011-23388025",
        "email": "sci@nic.in",
        "website": "https://sci.gov.in",
        "jurisdiction": "Judicial Matters, Constitutional Interpretation",
    },
    {
        "name": "Delhi Police",
        "category": "state",
        "level": "police",
        "address": "Police Headquarters, Delhi Police, ITO, Delhi - 110002",
        "phone": "011-2341000",
        "email": "delhi.police@gov.in",
        "website": "https://delhipolice.gov.in",
        "jurisdiction": "Law Enforcement, Public Safety",
    },
    {
        "name": "Municipal Corporation of Delhi",
        "category": "local",
        "level": "municipal",
        "address": "MCD Headquarters, Civic Centre, New Delhi - 110002",
        "phone": "011-23227790",
        "email": "mcd@nic.in",
        "website": "https://mcdonline.gov.in",
        "jurisdiction": "Municipal Services, Civic Amenities",
    },
]

SUBMISSION_GUIDELINES = {
    "normal": {
        "timeline": "30 days for response",
        "fees": "Rs. 10/- for BPL, Rs. 50/- for others",
        "documents": "Identity proof, Address proof",
        "submission": "In person or registered post",
    },
    "priority": {
        "timeline": "7 days for response",
        "fees": "Rs. 100/- (expedited processing)",
        "documents": "Identity proof, Address proof, Urgency proof",
        "submission": "In person with priority handling",
    },
    "urgent": {
        "timeline": "48 hours for response",
        "fees": "Rs. 500/- (emergency processing)",
        "documents": "Identity proof, Address proof, Emergency proof",
        "submission": "In person with emergency handling",
    },
}

DEPARTMENT_GUIDELINES = {
    "Supreme Court": {
        "timeline": "30 days",
        "fees": "Rs. 10/- for BPL, Rs. 50/- for others",
        "documents": "Case number, Identity proof",
        "submission": "In person or through Supreme Court portal",
    },
}

APPEAL_PROCESS = {
    "firstAppeal": {
        "timeline": "30 days from CPIO response",
        "authority": "First Appellate Authority",
        "fees": "Rs. 50/- (additional to RTI fee)",
        "procedure": "File First Appeal with CPIO within 30 days",
    },
    "secondAppeal": {
        "timeline": "90 days from First Appellate Authority decision",
        "authority": "Central Information Commission (CIC) or State Information Commission (SIC)",
        "fees": "Rs. 100/- (additional to First Appeal fee)",
        "procedure": "File Second Appeal with CIC/SIC within 90 days",
    },
    "complaint": {
        "timeline": "30 days from final decision",
        "authority": "Information Commission",
        "fees": "No fee for complaint",
        "procedure": "File complaint if no response or unsatisfactory response",
    },
}

SAMPLE_APPLICATIONS = [
    {
        "id": 1,
        "title": "Information about Government Schemes",
        "category": "schemes",
        "department": "Ministry of Rural Development",
        "subject": "Details of all government welfare schemes implemented in 2023",
        "description": "Complete list of schemes, eligibility criteria, benefits, and implementation status",
        "status": "approved",
        "constitutionalReference": "Article 19(1)(a) - Right to Information",
        "date": "2023-12-01",
    },
    {
        "id": 2,
        "title": "Police Investigation Report",
        "category": "legal",
        "department": "Delhi Police",
        "subject": "Status of FIR No. 123/2023 dated 15/11/2023",
        "description": "Current investigation status, evidence collected, chargesheet filed",
        "status": "pending",
        "constitutionalReference": "Article 21 - Right to Life and Liberty",
        "date": "2023-12-15",
    },
]

SUCCESS_STORIES = [
    {
        "id": 1,
        "title": "Citizen Exposes Corruption in Municipal Corporation",
        "department": "Municipal Corporation of Delhi",
        "category": "anti-corruption",
        "impact": "Recovered Rs. 50 lakhs of misappropriated funds",
        "timeline": "45 days",
        "constitutionalReference": "Article 19(1)(a) - Right to know",
        "date": "2023-10-15",
    },
    {
        "id": 2,
        "title": "Student Gets Admission Details from University",
        "department": "University Grants Commission",
        "category": "education",
        "impact": "Received complete admission process details",
        "timeline": "15 days",
        "constitutionalReference": "Article 21 - Right to Education",
        "date": "2023-11-20",
    },
    {
        "id": 3,
        "title": "Farmer Gets Land Records from Revenue Department",
        "department": "Ministry of Rural Development",
        "category": "land",
        "impact": "Received 7/12 extract of agricultural land",
        "timeline": "22 days",
        "constitutionalReference": "Article 300A - Right to Property",
        "date": "2023-09-10",
    },
]

STATISTICS = {
    "totalApplications": 1500000,
    "successRate": 65,
    "averageResponseTime": 25,
    "departmentsCovered": 2500,
    "constitutionalCases": 5000,
}

CONSTITUTIONAL_BASIS = {
    "primary": {
        "article": "Article 19(1)(a)",
        "title": "Right to freedom of speech and expression",
        "description": "Includes the right to information as part of freedom of speech",
    },
    "secondary": {
        "article": "Article 21",
        "title": "Protection of life and personal liberty",
        "description": "Right to information includes right to know about government actions",
    },
    "landmark": {
        "case": "State of U.P. v. Raj Narain (1975)",
        "title": "Right to Know",
        "description": "Supreme Court held that citizens have a right to know about every public act",
    },
    "legislation": {
        "act": "Right to Information Act, 2005",
        "title": "Statutory framework for right to information",
        "description": "Provides mechanism for citizens to access government information",
    },
}

CONSTITUTIONAL_REFERENCES = [
    {"article": "Article 19(1)(a)", "title": "Freedom of speech and expression", "relevance": "Right to receive information"},
    {"article": "Article 21", "title": "Protection of life and personal liberty", "relevance": "Right to know about government actions"},
    {"article": "Article 39A", "title": "Equal justice and free legal aid", "relevance": "Access to records needed for legal remedies"},
]

RECENT_APPLICATIONS = [
    {
        "id": "RTI2023/456",
        "applicant": "Rajesh Kumar",
        "department": "Ministry of Finance",
        "subject": "GST Implementation Data",
        "status": "under_process",
        "date": "2023-12-20",
        "responseDue": "2024-01-19",
    },
    {
        "id": "RTI2023/457",
        "applicant": "Priya Sharma",
        "department": "Delhi Police",
        "subject": "CCTV Camera Installation",
        "status": "approved",
        "date": "2023-12-19",
        "responseDue": "2024-01-18",
    },
]


def validate_application(payload) -> None:
    required = (payload.applicant_name, payload.applicant_address, payload.department_name, payload.subject)
    if any(value is None or not str(value).strip() for value in required):
        logger.warning("RTI application rejected: missing required fields")
        raise BadRequestError(REQUIRED_FIELDS_MESSAGE, code=ErrorCode.MISSING_FIELD)


def application_number(today: datetime) -> str:
    """RTI/<ddmmyyyy>/<0-999>"""
    return f"RTI/{today.strftime('%d%m%Y')}/{random.randint(0, 999)}"


def render_application(payload, today: Optional[datetime] = None) -> dict:
    today = today or datetime.now(timezone.utc)
    template = pick_language(TEMPLATES, payload.language)
    values = {
        "name": payload.applicant_name,
        "address": payload.applicant_address,
        "department": payload.department_name,
        "subject": payload.subject,
        "description": payload.description or "N/A",
        "period_from": payload.period_from or "N/A",
        "period_to": payload.period_to or "N/A",
        "date": today.strftime("%d/%m/%Y"),
    }
    lines = {key: text.format(**values) for key, text in template.items()}
    content = "\n".join(lines[key] if key else "" for key in LAYOUT)

    return {
        "applicationNumber": application_number(today),
        "urgency": payload.urgency,
        "content": content,
        # character count of the subject line plus the free-text description
        "wordCount": len(lines["subject"]) + len(payload.description or ""),
        "estimatedDays": ESTIMATED_DAYS.get(payload.urgency, ESTIMATED_DAYS["normal"]),
    }


def department_info(name: str) -> dict:
    return DEPARTMENT_INFO.get(name, GENERIC_DEPARTMENT)


def submission_guidelines(department: str, urgency: str) -> dict:
    if department in DEPARTMENT_GUIDELINES:
        return DEPARTMENT_GUIDELINES[department]
    return SUBMISSION_GUIDELINES.get(urgency, SUBMISSION_GUIDELINES["normal"])


def department_directory(category: Optional[str] = None, department: Optional[str] = None) -> List[dict]:
    departments = DEPARTMENT_DIRECTORY
    if category:
        departments = [d for d in departments if d["category"] == category]
    if department:
        needle = department.lower()
        departments = [d for d in departments if needle in d["name"].lower()]
    return departments


def draft_application(payload) -> dict:
    """POST /api/rti payload → application bundle."""
    validate_application(payload)
    logger.info(f"Drafting RTI application for {payload.department_name} (urgency={payload.urgency})")

    return {
        "rtiApplication": render_application(payload),
        "departmentInfo": department_info(payload.department_name),
        "submissionGuidelines": submission_guidelines(payload.department_name, payload.urgency),
        "appealProcess": APPEAL_PROCESS,
        "sampleApplications": SAMPLE_APPLICATIONS,
        "constitutionalReferences": CONSTITUTIONAL_REFERENCES,
    }


def directory(category: Optional[str] = None, department: Optional[str] = None) -> dict:
    return {
        "departments": department_directory(category, department),
        "successStories": SUCCESS_STORIES,
        "statistics": {**STATISTICS, "lastUpdated": datetime.now(timezone.utc).isoformat()},
        "constitutionalBasis": CONSTITUTIONAL_BASIS,
        "recentApplications": RECENT_APPLICATIONS,
    }
