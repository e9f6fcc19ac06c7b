# Embedded copy of the question set, used when the configured source
# cannot be read. Flat shape: questions hang directly off each category.

FALLBACK_DATASET: dict = {
    "categories": [
        {
            "id": "history",
            "name": "التاريخ",
            "questions": [
                {
                    "question": "من هو أول رئيس لجمهورية مصر العربية؟",
                    "options": ["أنور السادات", "جمال عبد الناصر", "محمد نجيب", "حسني مبارك"],
                    "answer": 2
                },
                {
                    "question": "في أي عام اندلعت الحرب العالمية الثانية؟",
                    "options": ["1914", "1939", "1945", "1950"],
                    "answer": 1
                },
                {
                    "question": "من هو مؤسس الدولة السعودية الأولى؟",
                    "options": ["الملك عبدالعزيز", "محمد بن سعود", "تركي بن عبدالله", "سلمان بن عبدالعزيز"],
                    "answer": 1
                },
                {
                    "question": "أين وقعت معركة بدر؟",
                    "options": ["في مكة", "في المدينة", "في بدر", "في الطائف"],
                    "answer": 2
                },
                {
                    "question": "من هو الخليفة العباسي الذي بنى مدينة بغداد؟",
                    "options": ["المنصور", "المأمون", "هارون الرشيد", "المعتصم"],
                    "answer": 0
                },
                {
                    "question": "كم عاماً استمرت الخلافة العثمانية؟",
                    "options": ["400 عام", "623 عام", "100 عام", "300 عام"],
                    "answer": 1
                }
            ]
        },
        {
            "id": "geography",
            "name": "الجغرافيا",
            "questions": [
                {
                    "question": "ما هي أكبر دولة عربية من حيث المساحة؟",
                    "options": ["السعودية", "الجزائر", "السودان", "ليبيا"],
                    "answer": 1
                },
                {
                    "question": "ما هو أطول نهر في العالم؟",
                    "options": ["النيل", "الأمازون", "اليانغتسي", "الدانوب"],
                    "answer": 0
                },
                {
                    "question": "ما هي عاصمة دولة عمان؟",
                    "options": ["مسقط", "الدوحة", "الرياض", "الكويت"],
                    "answer": 0
                },
                {
                    "question": "في أي قارة تقع جبال الأنديز؟",
                    "options": ["أفريقيا", "آسيا", "أوروبا", "أمريكا الجنوبية"],
                    "answer": 3
                },
                {
                    "question": "ما هي أكبر محيطات العالم؟",
                    "options": ["المحيط الهندي", "المحيط الهادئ", "المحيط الأطلسي", "المحيط المتجمد الشمالي"],
                    "answer": 1
                },
                {
                    "question": "كم عدد دول مجلس التعاون الخليجي؟",
                    "options": ["5", "6", "7", "8"],
                    "answer": 1
                }
            ]
        },
        {
            "id": "science",
            "name": "العلوم",
            "questions": [
                {
                    "question": "ما هو الكوكب الأحمر؟",
                    "options": ["المريخ", "الزهرة", "المشتري", "عطارد"],
                    "answer": 0
                },
                {
                    "question": "ما الوحدة الأساسية لقياس التيار الكهربائي؟",
                    "options": ["الفولت", "الأمبير", "الأوم", "الواط"],
                    "answer": 1
                },
                {
                    "question": "أي عضو في جسم الإنسان مسؤول عن ضخ الدم؟",
                    "options": ["الدماغ", "الكبد", "القلب", "الرئتين"],
                    "answer": 2
                },
                {
                    "question": "ما هو الغاز الأكثر وفرة في الغلاف الجوي للأرض؟",
                    "options": ["الأكسجين", "ثاني أكسيد الكربون", "النيتروجين", "الهيدروجين"],
                    "answer": 2
                },
                {
                    "question": "ما هو رمز العنصر الكيميائي للماء؟",
                    "options": ["CO2", "NaCl", "H2O", "O2"],
                    "answer": 2
                },
                {
                    "question": "كم عدد كواكب المجموعة الشمسية؟",
                    "options": ["7", "8", "9", "10"],
                    "answer": 1
                }
            ]
        },
        {
            "id": "literature",
            "name": "الأدب",
            "questions": [
                {
                    "question": "من هو مؤلف رواية 'البؤساء'؟",
                    "options": ["فيكتور هوغو", "دوستويفسكي", "تولستوي", "ديكنز"],
                    "answer": 0
                },
                {
                    "question": "أي شاعر عربي يُلقّب بأمير الشعراء؟",
                    "options": ["أحمد شوقي", "عنترة بن شداد", "نزار قباني", "المتنبي"],
                    "answer": 0
                },
                {
                    "question": "من هو كاتب قصة 'قنديل أم هاشم'؟",
                    "options": ["نجيب محفوظ", "يحيى حقي", "إحسان عبد القدوس", "طه حسين"],
                    "answer": 1
                },
                {
                    "question": "من هو مؤلف رواية 'ثلاثية غرناطة'؟",
                    "options": ["رضوى عاشور", "نوال السعداوي", "أحلام مستغانمي", "إدوارد الخراط"],
                    "answer": 0
                },
                {
                    "question": "من كتب رواية 'رجال في الشمس'؟",
                    "options": ["غسان كنفاني", "محمود درويش", "جبرا إبراهيم جبرا", "أمين معلوف"],
                    "answer": 0
                },
                {
                    "question": "أي من هذه الروايات كتبها مصطفى لطفي المنفلوطي؟",
                    "options": ["ماجدولين", "زينب", "عودة الروح", "دعاء الكروان"],
                    "answer": 0
                }
            ]
        },
        {
            "id": "sports",
            "name": "الرياضة",
            "questions": [
                {
                    "question": "كم عدد لاعبي فريق كرة القدم الأساسي؟",
                    "options": ["9", "10", "11", "12"],
                    "answer": 2
                },
                {
                    "question": "في أي دولة أُقيمت بطولة كأس العالم 2022؟",
                    "options": ["روسيا", "البرازيل", "قطر", "ألمانيا"],
                    "answer": 2
                },
                {
                    "question": "كم عدد الأشواط في مباراة كرة السلة؟",
                    "options": ["2", "3", "4", "5"],
                    "answer": 2
                },
                {
                    "question": "ما هو اسم البطولة الأوروبية لأبطال الدوري؟",
                    "options": ["الدوري الأوروبي", "كأس العالم للأندية", "دوري أبطال أوروبا", "كأس الاتحاد"],
                    "answer": 2
                },
                {
                    "question": "في أي رياضة يُستخدم المضرب والكرة الصغيرة الخضراء؟",
                    "options": ["التنس", "الاسكواش", "البيسبول", "الجولف"],
                    "answer": 0
                },
                {
                    "question": "ما هو عدد اللاعبين في فريق كرة الطائرة؟",
                    "options": ["5", "6", "7", "8"],
                    "answer": 1
                }
            ]
        },
        {
            "id": "technology",
            "name": "التكنولوجيا",
            "questions": [
                {
                    "question": "في أي عام أطلقت شركة أبل أول جهاز آيفون؟",
                    "options": ["2005", "2007", "2008", "2010"],
                    "answer": 1
                },
                {
                    "question": "ما هو نظام التشغيل المفتوح المصدر الشهير لتشغيل الخوادم؟",
                    "options": ["ويندوز", "لينكس", "ماك أو إس", "أندرويد"],
                    "answer": 1
                },
                {
                    "question": "من هو مخترع لغة البرمجة جافا؟",
                    "options": ["دينيس ريتشي", "جايمس جوسلينج", "غيدو فان روسم", "بيارن ستروستروب"],
                    "answer": 1
                },
                {
                    "question": "ما هي الشركة التي تطور نظام أندرويد؟",
                    "options": ["سامسونج", "جوجل", "أبل", "مايكروسوفت"],
                    "answer": 1
                },
                {
                    "question": "ما هو بروتوكول نقل النص الفائق المستخدم في الإنترنت؟",
                    "options": ["FTP", "SMTP", "HTTP", "SSH"],
                    "answer": 2
                },
                {
                    "question": "أي من هذه اللغات تُستخدم أساسًا لتطوير صفحات الويب؟",
                    "options": ["C++", "HTML", "Swift", "Python"],
                    "answer": 1
                }
            ]
        }
    ]
}
