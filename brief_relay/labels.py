from types import MappingProxyType

NAME_QUESTION = "الاسم"
PLACEHOLDER = "N/A"

# Full question text -> short label shown in the summary email.
LABELS = MappingProxyType({
    "الاسم": "الاسم",
    "هل تمتلك صفحة للمؤسسة وحساب انستجرام قائم بالفعل؟": "امتلاك صفحة",
    "تعريف عن المؤسسة (بالتفصيل)؟": "وصف المؤسسة",
    "ماهو تاريخ تأسيس المؤسسة؟": "تاريخ التأسيس",
    "ما هو رقم التسجيل الضريبي للمؤسسة؟": "الرقم الضريبي",
    "هل تمتلك تعاقدات مع شركات اخري؟": "تعاقدات مع شركات",
    "المنافسين": "المنافسين",
    "دعاية المنافسين": "دعايات المنافسين",
    "المنتجات والخدمات": "الخدمات",
    "نقاط القوة": "نقاط القوة",
    "نقاط الضعف": "نقاط الضعف",
    "العروض المتاحة": "عروض",
    "هل تمتلك فوتوسيشن أو فيديو سيشن سابق للمؤسسة؟": "عمل مسبق",
    "الاستهداف": "الاستهداف",
    "مبلغ التمويل": "مبلغ التمويل",
    "المنصات": "المنصات",
    "مواعيد العمل": "مواعيد العمل",
    "بيان الأسعار": "بيان أسعار",
    "أرقام وعناوين المؤسسة": "بيانات التواصل",
    "ما هو حجم المحتوي الذي تفضله؟": "حجم المحتوى",
    "هل تمتلك لوجو؟ هل تريد تجديده وعمل لوجو جديد؟ هل تمتلك سورس اللوجو القديم؟": "تفاصيل اللوجو",
    "ماهي الالوان المحببة لك بحيث تكون ألوان ال Branding الرئيسية على الصفحة؟": "الألوان المحببة",
})

def label_for(question: str) -> str:
    return LABELS.get(question) or question
