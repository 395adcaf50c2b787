from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

YES, NO = "نعم", "لا"
PLATFORMS_KEY = "المنصات"

@dataclass(frozen=True)
class Question:
    key: str
    prompt: str
    kind: str = "text"    # text | textarea | choice | multi | percent
    options: Tuple[Tuple[str, str], ...] = ()   # (label, value)
    default: Any = ""
    placeholder: str = ""
    required: bool = False

@dataclass(frozen=True)
class Section:
    title: str
    questions: Tuple[Question, ...] = field(default_factory=tuple)
    intro: str = ""

_YES_NO = ((YES, YES), (NO, NO))

def _yes_no(key: str, prompt: str = "") -> Question:
    return Question(key=key, prompt=prompt or key, kind="choice", options=_YES_NO, default=NO)

def _percent(key: str) -> Question:
    return Question(key=key, prompt=key, kind="percent", placeholder="ex: 10%")

SECTIONS: Tuple[Section, ...] = (
    Section("General info", (
        Question("الاسم", "الاسم*", placeholder="الاسم...", required=True),
    )),
    Section("Marketing Brief", (
        _yes_no("هل تمتلك صفحة للمؤسسة وحساب انستجرام قائم بالفعل؟",
                "هل تمتلك صفحة للمؤسسة وحساب انستجرام قائم بالفعل؟ (فى حالة نعم برجاء رفع حسابات الشركة أدمن واخذ يوزنيم وباسورد حساب الانستجرام؟)"),
        Question("تعريف عن المؤسسة (بالتفصيل)؟", "تعريف عن المؤسسة (بالتفصيل)؟", "textarea", placeholder="وصف المؤسسة..."),
        Question("ماهو تاريخ تأسيس المؤسسة؟", "ماهو تاريخ تأسيس المؤسسة؟", placeholder="تاريخ التأسيس..."),
        Question("ما هو رقم التسجيل الضريبي للمؤسسة؟", "ما هو رقم التسجيل الضريبي للمؤسسة؟", placeholder="الرقم الضريبي..."),
        _yes_no("هل تمتلك تعاقدات مع شركات اخري؟"),
        Question("المنافسين", "من هم المنافسين لك في المنطقة المحيطة أو المحافظة (أسماء) أو لينكات لديهم سوشيال ميديا؟",
                 "textarea", placeholder="المنافسين..."),
        Question("دعاية المنافسين", "أكتر 3 منافسين معجب بالدعايا الخاصة بهم (أسماء) أو لينكات مع ذكر سبب الأعجاب؟",
                 "textarea", placeholder="3_منافسين"),
        Question("المنتجات والخدمات", "ماهى المنتجات أو الخدمات التي تقدمها المؤسسة (بالتفصيل) مع ذكر ميزة أو العرض المتاح كل منتج (بالتفصيل)؟",
                 "textarea", placeholder="خدمات..."),
        Question("نقاط القوة", "ما هي نقاط القوة التي يجب التركيز عليها والتي تميز المؤسسة او الخدمة عن غيرها من المنافسين (بالتفصيل)؟",
                 "textarea", placeholder="نقاط القوة..."),
        Question("نقاط الضعف", "نقاط الضعف لدي المؤسسة وتريد حلها؟", "textarea", placeholder="نقاط الضعف..."),
        Question("العروض المتاحة", "ماهي العروض المتاحة المطلوب الأعلان عنها خلال الشهر الحالي؟", "textarea", placeholder="عروض..."),
        _yes_no("هل تمتلك فوتوسيشن أو فيديو سيشن سابق للمؤسسة؟",
                "هل تمتلك فوتوسيشن أو فيديو سيشن سابق للمؤسسة؟ (إذا كانت الإجابة بنعم برجاء إرفاق هذه الملفات)"),
    )),
    Section("Media buyer Brief", (
        Question("الاستهداف", "ما هو استهداف المؤسسة من حيث ( المكان - الفئة المستهدفة - السن - الجنس - ال class )",
                 "textarea", placeholder="الاستهداف..."),
        Question("مبلغ التمويل", "ما هو مبلغ التمويل؟", placeholder="مبلغ التمويل..."),
        Question(PLATFORMS_KEY, "ما هي المنصات المراد تركيز التمويل عليها؟", "multi",
                 options=(("Facebook", "facebook"), ("Instagram", "instagram"),
                          ("TikTok", "tiktok"), ("Snapchat", "snapchat")),
                 default=()),
    )),
    Section("Moderation Brief", (
        Question("مواعيد العمل", "ماهي مواعيد العمل الرسمية وما هي الاجازات؟", "textarea", placeholder="مواعيد..."),
        _yes_no("بيان الأسعار", "هل تمتلك بيان أسعار خاص للخدمات بالمؤسسة ؟ (إذا كانت الإجابة بنعم برجاء إرفاقه بهذا الملف)"),
        Question("أرقام وعناوين المؤسسة", "ما هي أرقام وعناوين المؤسسة؟", "textarea", placeholder="عنوان المؤسسة..."),
    )),
    Section("Creative Brief", (
        _percent("Creative ideas"),
        _percent("formal style"),
        _percent("Info posts"),
        _percent("Funny ideas"),
        _percent("Direct message"),
        _percent("Indirect message"),
        Question("ما هو حجم المحتوي الذي تفضله؟", "ما هو حجم المحتوي الذي تفضله؟", "choice",
                 options=(("مختصر ومفيد", "مختصر ومفيد"),
                          ("طويل وفيه قيمة ويسمح بالنقاش", "طويل وفيه قيمة ويسمح بالنقاش")),
                 default="مختصر ومفيد"),
        Question("هل تمتلك لوجو؟ هل تريد تجديده وعمل لوجو جديد؟ هل تمتلك سورس اللوجو القديم؟",
                 "هل تمتلك لوجو؟ هل تريد تجديده وعمل لوجو جديد؟ هل تمتلك سورس اللوجو القديم؟",
                 "textarea", placeholder="تفاصيل اللوجو..."),
        Question("ماهي الالوان المحببة لك بحيث تكون ألوان ال Branding الرئيسية على الصفحة؟",
                 "ماهي الالوان المحببة لك بحيث تكون ألوان ال Branding الرئيسية على الصفحة؟",
                 "textarea", placeholder="الالوان..."),
    ), intro="ما هو شكل المحتوي الذي تفضله على منصات السوشيال ميديا؟ (الاجابة نسبة مئوية %)"),
)

def all_questions() -> List[Question]:
    return [q for s in SECTIONS for q in s.questions]

def question(key: str) -> Question:
    for q in all_questions():
        if q.key == key:
            return q
    raise KeyError(key)

def default_answers() -> Dict[str, Any]:
    return {q.key: list(q.default) if q.kind == "multi" else q.default for q in all_questions()}
