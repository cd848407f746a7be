"""
samvidhan/assistants/common.py
Contacts and letter templates reused across sector assistants
"""
from typing import List

NALSA = {"name": "National Legal Services Authority (NALSA)", "phone": "1800-11-1320", "type": "legal_aid"}
NATIONAL_EMERGENCY = {"name": "National Emergency Number", "phone": "112", "type": "emergency"}
POLICE = {"name": "Police", "phone": "100", "type": "police"}
CONSUMER_HELPLINE = {"name": "National Consumer Helpline", "phone": "1915", "type": "consumer"}
CYBER_CRIME = {"name": "Cyber Crime Helpline", "phone": "1930", "type": "cyber"}
WOMEN_HELPLINE = {"name": "Women Helpline", "phone": "181", "type": "women"}

STATE_LEGAL_AID = {
    "delhi": [{"name": "Delhi State Legal Services Authority", "phone": "1516", "type": "legal_aid"}],
    "maharashtra": [{"name": "Maharashtra State Legal Services Authority", "phone": "022-22691395", "type": "legal_aid"}],
    "mumbai": [{"name": "Maharashtra State Legal Services Authority", "phone": "022-22691395", "type": "legal_aid"}],
    "karnataka": [{"name": "Karnataka State Legal Services Authority", "phone": "080-22111714", "type": "legal_aid"}],
    "bangalore": [{"name": "Karnataka State Legal Services Authority", "phone": "080-22111714", "type": "legal_aid"}],
    "tamil nadu": [{"name": "Tamil Nadu State Legal Services Authority", "phone": "044-25342441", "type": "legal_aid"}],
    "chennai": [{"name": "Tamil Nadu State Legal Services Authority", "phone": "044-25342441", "type": "legal_aid"}],
}


def complaint_letters(items: List[dict]) -> dict:
    """
    Build en/hi complaint letters.

    Each item: {"type", "title", "authority", "subject", "law"}.
    """
    english = []
    hindi = []
    for index, item in enumerate(items, start=1):
        english.append({
            "id": index,
            "title": item["title"],
            "type": item["type"],
            "template": (
                f"To,\nThe {item['authority']}\n[Address]\n[City] - [Pincode]\n\n"
                f"Date: [Date]\n\n"
                f"Subject: {item['subject']}\n\n"
                f"Dear Sir/Madam,\n\n"
                f"I, [Your Name], residing at [Your Address], wish to bring the following to your notice.\n\n"
                f"Details:\n- Date of incident: [Date]\n- Place: [Place]\n- Persons involved: [Names]\n"
                f"- Description: [Description]\n\n"
                f"This complaint is made under {item['law']} and the rights guaranteed by the Constitution of India.\n\n"
                f"I request you to:\n1. Inquire into the matter\n2. Take appropriate action\n"
                f"3. Inform me of the action taken within the prescribed time\n\n"
                f"Enclosures: [List of documents]\n\n"
                f"Yours faithfully,\n[Your Name]\n[Phone]\n[Email]"
            ),
        })
        hindi.append({
            "id": index,
            "title": item.get("title_hi", item["title"]),
            "type": item["type"],
            "template": (
                f"सेवा में,\n{item.get('authority_hi', item['authority'])}\n[पता]\n[शहर] - [पिनकोड]\n\n"
                f"दिनांक: [दिनांक]\n\n"
                f"विषय: {item.get('subject_hi', item['subject'])}\n\n"
                f"महोदय/महोदया,\n\n"
                f"मैं, [आपका नाम], निवासी [आपका पता], निम्नलिखित विषय आपके ध्यान में लाना चाहता/चाहती हूँ।\n\n"
                f"विवरण:\n- घटना की तिथि: [तिथि]\n- स्थान: [स्थान]\n- संबंधित व्यक्ति: [नाम]\n"
                f"- विवरण: [विवरण]\n\n"
                f"यह शिकायत {item['law']} तथा भारत के संविधान द्वारा दिए गए अधिकारों के अंतर्गत की जा रही है।\n\n"
                f"कृपया:\n1. मामले की जाँच करें\n2. उचित कार्रवाई करें\n3. निर्धारित समय में की गई कार्रवाई की सूचना दें\n\n"
                f"संलग्नक: [दस्तावेज़ों की सूची]\n\n"
                f"भवदीय,\n[आपका नाम]\n[फ़ोन]\n[ईमेल]"
            ),
        })
    return {"en": english, "hi": hindi}


def legal_option(description: str, timeline: str, success: int, cost: str, effort: str) -> dict:
    return {
        "description": description,
        "timeline": timeline,
        "success": success,
        "cost": cost,
        "effort": effort,
    }
