"""
samvidhan/seed/seed_data.py
Sample constitution content: parts, articles, explanations, amendments,
case laws, quiz questions, emergency guides and app settings.

Seeding is idempotent: nothing is written when any Part already exists.
"""
import logging
from datetime import datetime, timezone

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.orm.part import Part
from samvidhan.orm.article import Article, ArticleCategory
from samvidhan.orm.simplified_explanation import SimplifiedExplanation
from samvidhan.orm.amendment import Amendment
from samvidhan.orm.case_law import CaseLaw
from samvidhan.orm.mcq import MCQ
from samvidhan.orm.emergency_guide import EmergencyGuide
from samvidhan.orm.app_settings import AppSettings

logger = logging.getLogger(__name__)

FR = ArticleCategory.FUNDAMENTAL_RIGHT.value
DP = ArticleCategory.DIRECTIVE_PRINCIPLE.value
OTHER = ArticleCategory.OTHER.value


PARTS = [
    {
        "number": 1,
        "order": 1,
        "title_en": "The Union and its Territory",
        "title_hi": "संघ और उसका क्षेत्र",
        "title_ta": "ஒன்றியம் மற்றும் அதன் பிரதேசம்",
        "description": "Name and territory of the Union, admission and formation of States",
    },
    {
        "number": 3,
        "order": 3,
        "title_en": "Fundamental Rights",
        "title_hi": "मौलिक अधिकार",
        "title_ta": "அடிப்படை உரிமைகள்",
        "description": "Rights guaranteed to all citizens of India for their personal and collective development",
    },
    {
        "number": 4,
        "order": 4,
        "title_en": "Directive Principles of State Policy",
        "title_hi": "राज्य के नीति निदेशक तत्व",
        "title_ta": None,
        "description": "Principles the State shall apply in making laws",
    },
]

# part number, number, category, importance, title_en, title_hi, title_ta, content_en, content_hi
ARTICLES = [
    (1, "1", OTHER, 3, "Name and territory of the Union", "संघ का नाम और राज्यक्षेत्र", None,
     "India, that is Bharat, shall be a Union of States.",
     "भारत, अर्थात् इंडिया, राज्यों का संघ होगा।"),
    (3, "14", FR, 5, "Equality before Law", "कानून के समक्ष समानता", "சட்டத்தின் கீழ் சமத்துவம்",
     "The State shall not deny to any person equality before the law or the equal protection of the laws "
     "within the territory of India.",
     "राज्य किसी भी व्यक्ति को भारत के क्षेत्र के भीतर कानून के समक्ष समानता या कानूनों के समान संरक्षण से "
     "इनकार नहीं करेगा।"),
    (3, "15", FR, 4, "Prohibition of discrimination", "भेदभाव का प्रतिषेध", None,
     "The State shall not discriminate against any citizen on grounds only of religion, race, caste, sex, "
     "place of birth or any of them.",
     None),
    (3, "17", FR, 4, "Abolition of Untouchability", "अस्पृश्यता का अंत", None,
     "Untouchability is abolished and its practice in any form is forbidden.",
     None),
    (3, "19", FR, 5, "Protection of certain rights regarding freedom of speech",
     "भाषण की स्वतंत्रता के संबंध में कुछ अधिकारों का संरक्षण",
     "பேச்சு சுதந்திரம் தொடர்பான சில உரிமைகளின் பாதுகாப்பு",
     "All citizens shall have the right to freedom of speech and expression, to assemble peaceably and "
     "without arms, to form associations or unions, to move freely throughout the territory of India, to "
     "reside and settle in any part of India, and to practise any profession, or to carry on any occupation, "
     "trade or business.",
     None),
    (3, "21", FR, 5, "Protection of Life and Personal Liberty", "जीवन और व्यक्तिगत स्वतंत्रता का संरक्षण",
     "வாழ்க்கை மற்றும் தனிப்பட்ட சுதந்திரத்தின் பாதுகாப்பு",
     "No person shall be deprived of his life or personal liberty except according to procedure "
     "established by law.",
     "किसी व्यक्ति को कानून द्वारा स्थापित प्रक्रिया के अनुसार ही उसके जीवन या व्यक्तिगत स्वतंत्रता से वंचित "
     "किया जाएगा।"),
    (3, "21A", FR, 4, "Right to Education", "शिक्षा का अधिकार", None,
     "The State shall provide free and compulsory education to all children of the age of six to fourteen "
     "years in such manner as the State may, by law, determine.",
     None),
    (3, "23", FR, 3, "Prohibition of traffic in human beings and forced labour",
     "मानव के दुर्व्यापार और बलात्श्रम का प्रतिषेध", None,
     "Traffic in human beings and begar and other similar forms of forced labour are prohibited.",
     None),
    (3, "25", FR, 3, "Freedom of conscience and free profession, practice and propagation of religion",
     None, None,
     "All persons are equally entitled to freedom of conscience and the right freely to profess, practise "
     "and propagate religion, subject to public order, morality and health.",
     None),
    (3, "29", FR, 3, "Protection of interests of minorities", None, None,
     "Any section of the citizens having a distinct language, script or culture of its own shall have the "
     "right to conserve the same.",
     None),
    (3, "32", FR, 5, "Remedies for enforcement of rights", "अधिकारों को प्रवर्तित कराने के लिए उपचार", None,
     "The right to move the Supreme Court by appropriate proceedings for the enforcement of the rights "
     "conferred by this Part is guaranteed.",
     None),
    (4, "39A", DP, 4, "Equal justice and free legal aid", "समान न्याय और निःशुल्क विधिक सहायता", None,
     "The State shall secure that the operation of the legal system promotes justice, on a basis of equal "
     "opportunity, and shall provide free legal aid.",
     None),
    (4, "45", DP, 3, "Provision for early childhood care and education", None, None,
     "The State shall endeavour to provide early childhood care and education for all children until they "
     "complete the age of six years.",
     None),
]

# article number -> list of explanation rows
EXPLANATIONS = {
    "14": [
        {
            "language": "en",
            "title": "What Equality Before Law Means for You",
            "content": "Article 14 ensures that everyone is equal in the eyes of law. No one can be "
                       "discriminated against based on religion, race, caste, sex, or place of birth.",
            "examples": "A rich person and a poor person who commit the same offence face the same law\n"
                        "Officials cannot use their power to favour certain people",
            "dos": "Expect equal treatment from authorities\nReport discrimination",
            "donts": "Don't expect special treatment because of wealth or status",
        },
    ],
    "19": [
        {
            "language": "en",
            "title": "Freedom of Speech and Expression",
            "content": "Article 19 gives you the right to express your opinions, ideas and beliefs freely, "
                       "including speaking, writing, art and peaceful protest.",
            "examples": "You can criticise government policies\nYou can take part in a peaceful protest",
            "dos": "Express yourself responsibly\nUse peaceful means",
            "donts": "Don't spread hate speech\nDon't incite violence",
        },
    ],
    "21": [
        {
            "language": "en",
            "title": "Your Right to Life and Liberty",
            "content": "Article 21 protects your right to live with dignity. The government cannot take away "
                       "your life or freedom except through a fair legal procedure.",
            "examples": "Police cannot torture you\nHospitals cannot deny emergency treatment",
            "dos": "Know your rights during arrest\nSeek legal help immediately",
            "donts": "Don't resist lawful procedures\nDon't take the law into your own hands",
        },
        {
            "language": "hi",
            "title": "आपका जीवन और स्वतंत्रता का अधिकार",
            "content": "अनुच्छेद 21 आपके सम्मान के साथ जीने के अधिकार की रक्षा करता है।",
            "examples": "पुलिस आपको यातना नहीं दे सकती",
            "dos": "गिरफ्तारी के समय अपने अधिकार जानें",
            "donts": "कानून अपने हाथ में न लें",
        },
    ],
}

# number, year, title_en, title_hi, title_ta, description, act_name, article numbers
AMENDMENTS = [
    (1, 1951, "First Amendment Act", "प्रथम संविधान संशोधन अधिनियम", "முதல் அரசியலமைப்பு திருத்தச் சட்டம்",
     "Allowed land reform laws and placed reasonable restrictions on freedom of speech.",
     "The Constitution (First Amendment) Act, 1951", ["15", "19"]),
    (42, 1976, "Forty-Second Amendment", "बयालीसवां संविधान संशोधन", None,
     "Added 'Socialist' and 'Secular' to the Preamble and inserted the directive on free legal aid.",
     "The Constitution (Forty-second Amendment) Act, 1976", ["39A"]),
    (44, 1978, "Forty-Fourth Amendment", None, None,
     "Made Articles 20 and 21 non-suspendable during an emergency and removed the right to property "
     "from Part III.",
     "The Constitution (Forty-fourth Amendment) Act, 1978", ["19", "21"]),
    (86, 2002, "Eighty-Sixth Amendment", "छियासीवां संविधान संशोधन", None,
     "Made elementary education a fundamental right for children aged six to fourteen.",
     "The Constitution (Eighty-sixth Amendment) Act, 2002", ["21A", "45"]),
    (103, 2019, "One Hundred and Third Amendment", None, None,
     "Enabled reservation for economically weaker sections.",
     "The Constitution (One Hundred and Third Amendment) Act, 2019", ["15"]),
]

# title, citation, year, summary_en, summary_hi, landmark, article numbers
CASE_LAWS = [
    ("Kesavananda Bharati v. State of Kerala", "AIR 1973 SC 1461", 1973,
     "Established the basic structure doctrine: Parliament cannot amend the basic structure of the "
     "Constitution.",
     "ऐतिहासिक मामला जिसने 'मूल संरचना सिद्धांत' स्थापित किया।",
     True, ["14", "19", "32"]),
    ("Maneka Gandhi v. Union of India", "AIR 1978 SC 597", 1978,
     "Expanded Article 21: procedure established by law must be fair, just and reasonable.",
     "अनुच्छेद 21 के दायरे का विस्तार किया।",
     True, ["14", "19", "21"]),
    ("Olga Tellis v. Bombay Municipal Corporation", "AIR 1986 SC 180", 1985,
     "Held that the right to livelihood is part of the right to life.",
     None, True, ["21"]),
    ("Vishaka v. State of Rajasthan", "AIR 1997 SC 3011", 1997,
     "Laid down guidelines against sexual harassment at the workplace.",
     None, True, ["14", "15", "21"]),
    ("Unni Krishnan v. State of Andhra Pradesh", "1993 AIR 2178", 1993,
     "Recognised a right to education for children up to fourteen years.",
     None, False, ["21", "21A"]),
]

# article number, question, options A-D, answer, explanation, difficulty, category
MCQS = [
    ("14", "What does Article 14 guarantee?",
     ("Right to equality", "Right to freedom", "Right against exploitation", "Right to education"),
     "A", "Article 14 guarantees equality before law and equal protection of laws to all persons.",
     "easy", "UPSC"),
    ("21", "Under what condition can a person be deprived of life according to Article 21?",
     ("Never under any condition", "According to procedure established by law", "During emergency",
      "If convicted by court"),
     "B", "No person shall be deprived of life except according to procedure established by law.",
     "medium", "Judiciary"),
    ("19", "Which of the following is NOT covered under Article 19?",
     ("Freedom of speech", "Right to move freely", "Right to practise any profession", "Right to property"),
     "D", "The right to property is now a legal right under Article 300A.",
     "hard", "UPSC"),
    ("21A", "Article 21A provides free and compulsory education for children of which age group?",
     ("3 to 10 years", "6 to 14 years", "5 to 15 years", "6 to 18 years"),
     "B", "Article 21A covers children from six to fourteen years of age.",
     "easy", "SSC"),
    ("32", "Which Article is called the 'heart and soul' of the Constitution?",
     ("Article 14", "Article 19", "Article 21", "Article 32"),
     "D", "Dr. Ambedkar described the right to constitutional remedies as its heart and soul.",
     "medium", "UPSC"),
    ("17", "Article 17 of the Constitution abolishes:",
     ("Titles", "Untouchability", "Forced labour", "Child labour"),
     "B", "Article 17 abolishes untouchability and forbids its practice in any form.",
     "easy", "SSC"),
]

EMERGENCY_GUIDES = [
    {
        "title": "Police Arrest",
        "category": "arrest",
        "content_en": "If you are arrested: 1) Ask why you are being arrested 2) Inform a family member or "
                      "friend 3) Ask for a lawyer 4) Don't sign anything without legal advice 5) You must be "
                      "produced before a magistrate within 24 hours.",
        "content_hi": "यदि पुलिस आपको गिरफ्तार करती है: 1) पूछें कि आपको क्यों गिरफ्तार किया जा रहा है "
                      "2) अपने वकील या परिवार को कॉल करें 3) बिना कानूनी सलाह के कुछ भी हस्ताक्षर न करें।",
        "content_ta": "காவல்துறையால் நீங்கள் கைது செய்யப்பட்டால்: 1) ஏன் கைது செய்யப்படுகிறீர்கள் என்று "
                      "கேளுங்கள் 2) உங்கள் வழக்கறிஞரை அழைக்கவும்.",
        "helpline": "112",
        "legal_aid": "Contact the District Legal Services Authority for free legal aid",
    },
    {
        "title": "Search & Seizure",
        "category": "search",
        "content_en": "During a police search: 1) Ask for the search warrant 2) Insist that two independent "
                      "witnesses are present 3) Get a list of seized items 4) Women can only be searched by "
                      "female officers.",
        "content_hi": "पुलिस खोज के दौरान: 1) खोज वारंट मांगें 2) जब्त किए गए सामान की सूची प्राप्त करें।",
        "content_ta": None,
        "helpline": "1091",
        "legal_aid": "National Human Rights Commission: 011-23385368",
    },
    {
        "title": "Illegal Detention",
        "category": "detention",
        "content_en": "Nobody can be detained beyond 24 hours without being produced before a magistrate. "
                      "Family members can file a habeas corpus petition in the High Court.",
        "content_hi": None,
        "content_ta": None,
        "helpline": "15100",
        "legal_aid": "NALSA legal aid helpline: 15100",
    },
    {
        "title": "Domestic Violence",
        "category": "domestic_violence",
        "content_en": "Call the women helpline, contact the Protection Officer and seek a protection order "
                      "under the Protection of Women from Domestic Violence Act, 2005.",
        "content_hi": None,
        "content_ta": None,
        "helpline": "181",
        "legal_aid": "National Commission for Women: 7827170170",
    },
]


def app_settings_rows() -> list:
    return [
        ("app_version", "1.0.0"),
        ("last_data_update", datetime.now(timezone.utc).isoformat()),
        ("supported_languages", "en,hi,ta"),
        ("emergency_helpline", "112"),
        ("legal_aid_helpline", "15100"),
    ]


async def seed_database(db: AsyncSession) -> dict:
    """
    Insert the sample content in one transaction.

    Returns per-table counts; `skipped` is True when Parts already exist
    and nothing was written.
    """
    existing = (await db.execute(select(func.count()).select_from(Part))).scalar()
    if existing:
        logger.info(f"✓ Constitution content already seeded ({existing} parts found)")
        return {"skipped": True, "parts": existing}

    parts = {}
    for row in PARTS:
        part = Part(**row)
        parts[part.number] = part
        db.add(part)

    articles = {}
    for part_number, number, category, importance, title_en, title_hi, title_ta, content_en, content_hi in ARTICLES:
        article = Article(
            number=number,
            part=parts[part_number],
            category=category,
            importance=importance,
            title_en=title_en,
            title_hi=title_hi,
            title_ta=title_ta,
            content_en=content_en,
            content_hi=content_hi,
        )
        articles[number] = article
        db.add(article)

    explanation_count = 0
    for number, rows in EXPLANATIONS.items():
        for row in rows:
            db.add(SimplifiedExplanation(article=articles[number], **row))
            explanation_count += 1

    for number, year, title_en, title_hi, title_ta, description, act_name, linked in AMENDMENTS:
        db.add(Amendment(
            number=number,
            year=year,
            title_en=title_en,
            title_hi=title_hi,
            title_ta=title_ta,
            description=description,
            act_name=act_name,
            articles=[articles[n] for n in linked],
        ))

    for title, citation, year, summary_en, summary_hi, landmark, linked in CASE_LAWS:
        db.add(CaseLaw(
            title=title,
            citation=citation,
            court="Supreme Court of India",
            year=year,
            summary_en=summary_en,
            summary_hi=summary_hi,
            landmark=landmark,
            articles=[articles[n] for n in linked],
        ))

    for number, question, options, answer, explanation, difficulty, category in MCQS:
        option_a, option_b, option_c, option_d = options
        db.add(MCQ(
            article=articles[number],
            question=question,
            option_a=option_a,
            option_b=option_b,
            option_c=option_c,
            option_d=option_d,
            correct_answer=answer,
            explanation=explanation,
            difficulty=difficulty,
            category=category,
        ))

    for row in EMERGENCY_GUIDES:
        db.add(EmergencyGuide(**row))

    settings_rows = app_settings_rows()
    for key, value in settings_rows:
        db.add(AppSettings(key=key, value=value))

    await db.commit()

    counts = {
        "skipped": False,
        "parts": len(PARTS),
        "articles": len(ARTICLES),
        "explanations": explanation_count,
        "amendments": len(AMENDMENTS),
        "caseLaws": len(CASE_LAWS),
        "mcqs": len(MCQS),
        "emergencyGuides": len(EMERGENCY_GUIDES),
        "settings": len(settings_rows),
    }
    logger.info(f"✓ Sample data seeded: {counts}")
    return counts
