"""Starter dictionary used by the in-memory source and by ``run.py --seed``.

Rows use the same column names as the persistent tables so they can be
inserted as-is.
"""

IDIOM_ROWS = [
    {
        "phrase": "kick the bucket",
        "normalized_phrase": "kick the bucket",
        "meaning": "to die",
        "translations": {
            "spanish": "estirar la pata",
            "french": "casser sa pipe",
            "german": "ins Gras beißen",
            "italian": "tirare le cuoia",
            "portuguese": "bater as botas",
            "hindi": "चल बसना",
            "arabic": "انتقل إلى رحمة الله",
            "chinese": "翘辫子",
            "japanese": "亡くなる",
            "korean": "세상을 떠나다",
            "russian": "сыграть в ящик",
        },
        "category": "idiom",
        "register": "informal",
    },
    {
        "phrase": "break a leg",
        "normalized_phrase": "break a leg",
        "meaning": "good luck (especially in performing arts)",
        "translations": {
            "spanish": "mucha mierda",
            "french": "merde",
            "german": "Hals- und Beinbruch",
            "italian": "in bocca al lupo",
            "portuguese": "boa sorte",
            "hindi": "शुभकामनाएं",
            "arabic": "حظ سعيد",
            "chinese": "祝你好运",
            "japanese": "頑張って",
            "korean": "행운을 빌어요",
            "russian": "ни пуха, ни пера",
        },
        "category": "idiom",
        "register": "informal",
    },
    {
        "phrase": "piece of cake",
        "normalized_phrase": "piece of cake",
        "meaning": "something very easy",
        "translations": {
            "spanish": "pan comido",
            "french": "c'est du gâteau",
            "german": "ein Kinderspiel",
            "italian": "una passeggiata",
            "portuguese": "moleza",
            "hindi": "बाएं हाथ का खेल",
            "arabic": "سهل جداً",
            "chinese": "小菜一碟",
            "japanese": "朝飯前",
            "korean": "식은 죽 먹기",
            "russian": "пара пустяков",
        },
        "category": "idiom",
        "register": "informal",
    },
    {
        "phrase": "raining cats and dogs",
        "normalized_phrase": "raining cats and dogs",
        "meaning": "raining very heavily",
        "translations": {
            "spanish": "llueve a cántaros",
            "french": "il pleut des cordes",
            "german": "es regnet in Strömen",
            "italian": "piove a catinelle",
            "portuguese": "chovendo canivetes",
            "hindi": "मूसलाधार बारिश",
            "arabic": "تمطر بغزارة",
            "chinese": "倾盆大雨",
            "japanese": "土砂降り",
            "korean": "비가 억수같이 오다",
            "russian": "льёт как из ведра",
        },
        "category": "idiom",
        "register": "informal",
    },
    {
        "phrase": "cost an arm and a leg",
        "normalized_phrase": "cost an arm and a leg",
        "meaning": "very expensive",
        "translations": {
            "spanish": "costar un ojo de la cara",
            "french": "coûter les yeux de la tête",
            "german": "ein Vermögen kosten",
            "italian": "costare un occhio della testa",
            "portuguese": "custar os olhos da cara",
            "hindi": "बहुत महंगा",
            "arabic": "يكلف ثروة",
            "chinese": "价值连城",
            "japanese": "目の玉が飛び出るほど高い",
            "korean": "팔다리가 빠지는 값",
            "russian": "стоить целое состояние",
        },
        "category": "idiom",
        "register": "informal",
    },
    {
        "phrase": "hit the nail on the head",
        "normalized_phrase": "hit the nail on the head",
        "meaning": "to be exactly right",
        "translations": {
            "spanish": "dar en el clavo",
            "french": "mettre le doigt dessus",
            "german": "den Nagel auf den Kopf treffen",
            "italian": "colpire nel segno",
            "portuguese": "acertar na mosca",
            "hindi": "बिल्कुल सही कहना",
            "arabic": "أصاب كبد الحقيقة",
            "chinese": "一针见血",
            "japanese": "的を射る",
            "korean": "정곡을 찌르다",
            "russian": "попасть в точку",
        },
        "category": "idiom",
        "register": "neutral",
    },
    {
        "phrase": "beat around the bush",
        "normalized_phrase": "beat around the bush",
        "meaning": "to avoid getting to the point",
        "translations": {
            "spanish": "andarse por las ramas",
            "french": "tourner autour du pot",
            "german": "um den heißen Brei herumreden",
            "italian": "menare il can per l'aia",
            "portuguese": "enrolar",
            "hindi": "इधर-उधर की बात करना",
            "arabic": "يلف ويدور",
            "chinese": "拐弯抹角",
            "japanese": "遠回しに言う",
            "korean": "빙빙 돌려 말하다",
            "russian": "ходить вокруг да около",
        },
        "category": "idiom",
        "register": "neutral",
    },
    {
        "phrase": "once in a blue moon",
        "normalized_phrase": "once in a blue moon",
        "meaning": "very rarely",
        "translations": {
            "spanish": "de higos a brevas",
            "french": "tous les trente-six du mois",
            "german": "alle Jubeljahre",
            "italian": "una volta ogni morte di papa",
            "portuguese": "de vez em quando",
            "hindi": "कभी-कभार",
            "arabic": "نادراً جداً",
            "chinese": "千载难逢",
            "japanese": "ごく稀に",
            "korean": "아주 드물게",
            "russian": "в кои-то веки",
        },
        "category": "idiom",
        "register": "neutral",
    },
    {
        "phrase": "let the cat out of the bag",
        "normalized_phrase": "let the cat out of the bag",
        "meaning": "to reveal a secret",
        "translations": {
            "spanish": "descubrir el pastel",
            "french": "vendre la mèche",
            "german": "die Katze aus dem Sack lassen",
            "italian": "vuotare il sacco",
            "portuguese": "soltar a língua",
            "hindi": "राज़ खोलना",
            "arabic": "كشف السر",
            "chinese": "泄露秘密",
            "japanese": "秘密をばらす",
            "korean": "비밀을 누설하다",
            "russian": "проболтаться",
        },
        "category": "idiom",
        "register": "informal",
    },
    {
        "phrase": "under the weather",
        "normalized_phrase": "under the weather",
        "meaning": "feeling ill or unwell",
        "translations": {
            "spanish": "estar pachucho",
            "french": "être patraque",
            "german": "angeschlagen sein",
            "italian": "sentirsi poco bene",
            "portuguese": "estar adoentado",
            "hindi": "तबीयत ठीक नहीं",
            "arabic": "أشعر بتوعك",
            "chinese": "身体不适",
            "japanese": "体調が悪い",
            "korean": "몸이 안 좋다",
            "russian": "неважно себя чувствовать",
        },
        "category": "idiom",
        "register": "informal",
    },
    {
        "phrase": "the ball is in your court",
        "normalized_phrase": "the ball is in your court",
        "meaning": "it is your decision or responsibility now",
        "translations": {
            "spanish": "la pelota está en tu tejado",
            "french": "la balle est dans ton camp",
            "german": "der Ball liegt bei dir",
            "italian": "la palla è nel tuo campo",
            "portuguese": "a bola está no seu campo",
            "hindi": "अब यह तुम पर निर्भर है",
            "arabic": "الكرة في ملعبك",
            "chinese": "轮到你了",
            "japanese": "あなた次第です",
            "korean": "당신 차례입니다",
            "russian": "мяч на твоей стороне",
        },
        "category": "idiom",
        "register": "neutral",
    },
    {
        "phrase": "bite off more than you can chew",
        "normalized_phrase": "bite off more than you can chew",
        "meaning": "to take on more than you can handle",
        "translations": {
            "spanish": "abarcar más de lo que puedes",
            "french": "avoir les yeux plus gros que le ventre",
            "german": "sich übernehmen",
            "italian": "fare il passo più lungo della gamba",
            "portuguese": "dar um passo maior que a perna",
            "hindi": "अपनी हद से ज़्यादा लेना",
            "arabic": "يحمل أكثر من طاقته",
            "chinese": "贪多嚼不烂",
            "japanese": "無理をする",
            "korean": "무리하다",
            "russian": "откусить больше, чем можешь прожевать",
        },
        "category": "idiom",
        "register": "neutral",
    },
    {
        "phrase": "get out of hand",
        "normalized_phrase": "get out of hand",
        "meaning": "to get out of control",
        "translations": {
            "spanish": "írsele de las manos",
            "french": "échapper à tout contrôle",
            "german": "außer Kontrolle geraten",
            "italian": "sfuggire di mano",
            "portuguese": "sair do controle",
            "hindi": "हाथ से निकल जाना",
            "arabic": "يخرج عن السيطرة",
            "chinese": "失控",
            "japanese": "手に負えなくなる",
            "korean": "통제불능이 되다",
            "russian": "выйти из-под контроля",
        },
        "category": "idiom",
        "register": "neutral",
    },
    {
        "phrase": "add insult to injury",
        "normalized_phrase": "add insult to injury",
        "meaning": "to make a bad situation worse",
        "translations": {
            "spanish": "para colmo de males",
            "french": "ajouter l'insulte à l'injure",
            "german": "noch eins draufsetzen",
            "italian": "oltre al danno la beffa",
            "portuguese": "para piorar as coisas",
            "hindi": "जले पर नमक छिड़कना",
            "arabic": "زاد الطين بلة",
            "chinese": "雪上加霜",
            "japanese": "泣きっ面に蜂",
            "korean": "설상가상",
            "russian": "подливать масла в огонь",
        },
        "category": "idiom",
        "register": "neutral",
    },
    {
        "phrase": "back to square one",
        "normalized_phrase": "back to square one",
        "meaning": "back to the beginning",
        "translations": {
            "spanish": "volver a empezar de cero",
            "french": "retour à la case départ",
            "german": "wieder bei null anfangen",
            "italian": "tornare al punto di partenza",
            "portuguese": "voltar à estaca zero",
            "hindi": "फिर से शुरू करना",
            "arabic": "العودة إلى نقطة البداية",
            "chinese": "回到原点",
            "japanese": "振り出しに戻る",
            "korean": "원점으로 돌아가다",
            "russian": "вернуться к исходной точке",
        },
        "category": "idiom",
        "register": "neutral",
    },
]

PHRASE_ROWS = [
    {
        "phrase_key": "how_are_you",
        "english": "how are you",
        "category": "greeting",
        "translations": {
            "spanish": "¿cómo estás?",
            "french": "comment allez-vous?",
            "german": "wie geht es dir?",
            "italian": "come stai?",
            "portuguese": "como você está?",
            "hindi": "आप कैसे हैं?",
            "bengali": "আপনি কেমন আছেন?",
            "tamil": "நீங்கள் எப்படி இருக்கிறீர்கள்?",
            "telugu": "మీరు ఎలా ఉన్నారు?",
            "kannada": "ನೀವು ಹೇಗಿದ್ದೀರಿ?",
            "malayalam": "നിങ്ങൾ എങ്ങനെയുണ്ട്?",
            "gujarati": "તમે કેમ છો?",
            "marathi": "तुम्ही कसे आहात?",
            "punjabi": "ਤੁਸੀਂ ਕਿਵੇਂ ਹੋ?",
            "arabic": "كيف حالك؟",
            "chinese": "你好吗？",
            "japanese": "お元気ですか？",
            "korean": "어떻게 지내세요?",
            "russian": "как дела?",
            "turkish": "nasılsınız?",
            "thai": "สบายดีไหม?",
            "vietnamese": "bạn khỏe không?",
            "indonesian": "apa kabar?",
        },
    },
    {
        "phrase_key": "thank_you_very_much",
        "english": "thank you very much",
        "category": "greeting",
        "translations": {
            "spanish": "muchas gracias",
            "french": "merci beaucoup",
            "german": "vielen Dank",
            "italian": "grazie mille",
            "portuguese": "muito obrigado",
            "hindi": "बहुत धन्यवाद",
            "bengali": "অনেক ধন্যবাদ",
            "tamil": "மிக்க நன்றி",
            "telugu": "చాలా ధన్యవాదాలు",
            "kannada": "ತುಂಬಾ ಧನ್ಯವಾದಗಳು",
            "malayalam": "വളരെ നന്ദി",
            "gujarati": "ખૂબ ખૂબ આભાર",
            "marathi": "खूप खूप धन्यवाद",
            "punjabi": "ਬਹੁਤ ਧੰਨਵਾਦ",
            "arabic": "شكرا جزيلا",
            "chinese": "非常感谢",
            "japanese": "どうもありがとうございます",
            "korean": "대단히 감사합니다",
            "russian": "большое спасибо",
            "turkish": "çok teşekkür ederim",
            "thai": "ขอบคุณมาก",
            "vietnamese": "cảm ơn rất nhiều",
            "indonesian": "terima kasih banyak",
        },
    },
    {
        "phrase_key": "i_love_you",
        "english": "i love you",
        "category": "greeting",
        "translations": {
            "spanish": "te quiero",
            "french": 'je t\'aime',
            "german": "ich liebe dich",
            "italian": "ti amo",
            "portuguese": "eu te amo",
            "hindi": "मैं तुमसे प्यार करता हूं",
            "bengali": "আমি তোমাকে ভালোবাসি",
            "tamil": "நான் உன்னை காதலிக்கிறேன்",
            "telugu": "నేను నిన్ను ప్రేమిస్తున్నాను",
            "kannada": "ನಾನು ನಿನ್ನನ್ನು ಪ್ರೀತಿಸುತ್ತೇನೆ",
            "malayalam": "ഞാൻ നിന്നെ സ്നേഹിക്കുന്നു",
            "gujarati": "હું તને પ્રેમ કરું છું",
            "marathi": "मी तुझ्यावर प्रेम करतो",
            "punjabi": "ਮੈਂ ਤੈਨੂੰ ਪਿਆਰ ਕਰਦਾ ਹਾਂ",
            "urdu": "میں تم سے محبت کرتا ہوں",
            "arabic": "أنا أحبك",
            "chinese": "我爱你",
            "japanese": "愛してる",
            "korean": "사랑해요",
            "russian": "я тебя люблю",
            "turkish": "seni seviyorum",
            "thai": "ฉันรักคุณ",
            "vietnamese": "tôi yêu bạn",
            "indonesian": "aku cinta kamu",
        },
    },
    {
        "phrase_key": "good_morning",
        "english": "good morning",
        "category": "greeting",
        "translations": {
            "spanish": "buenos días",
            "french": "bonjour",
            "german": "guten Morgen",
            "italian": "buongiorno",
            "portuguese": "bom dia",
            "hindi": "सुप्रभात",
            "bengali": "সুপ্রভাত",
            "tamil": "காலை வணக்கம்",
            "telugu": "శుభోదయం",
            "kannada": "ಶುಭೋದಯ",
            "malayalam": "സുപ്രഭാതം",
            "gujarati": "સુપ્રભાત",
            "marathi": "सुप्रभात",
            "punjabi": "ਸ਼ੁਭ ਸਵੇਰ",
            "arabic": "صباح الخير",
            "chinese": "早上好",
            "japanese": "おはようございます",
            "korean": "좋은 아침이에요",
            "russian": "доброе утро",
            "turkish": "günaydın",
            "thai": "สวัสดีตอนเช้า",
            "vietnamese": "chào buổi sáng",
            "indonesian": "selamat pagi",
        },
    },
    {
        "phrase_key": "good_night",
        "english": "good night",
        "category": "greeting",
        "translations": {
            "spanish": "buenas noches",
            "french": "bonne nuit",
            "german": "gute Nacht",
            "italian": "buonanotte",
            "portuguese": "boa noite",
            "hindi": "शुभ रात्रि",
            "bengali": "শুভ রাত্রি",
            "tamil": "இனிய இரவு",
            "telugu": "శుభ రాత్రి",
            "kannada": "ಶುಭ ರಾತ್ರಿ",
            "malayalam": "ശുഭരാത്രി",
            "gujarati": "શુભ રાત્રી",
            "marathi": "शुभ रात्री",
            "punjabi": "ਸ਼ੁਭ ਰਾਤ",
            "arabic": "تصبح على خير",
            "chinese": "晚安",
            "japanese": "おやすみなさい",
            "korean": "좋은 밤 되세요",
            "russian": "спокойной ночи",
            "turkish": "iyi geceler",
            "thai": "ราตรีสวัสดิ์",
            "vietnamese": "chúc ngủ ngon",
            "indonesian": "selamat malam",
        },
    },
]

# Single words for word-by-word lookup: english -> {column: translation}
_VOCABULARY = {
    "hello": {"spanish": "hola", "french": "bonjour", "german": "hallo", "hindi": "नमस्ते", "portuguese": "olá", "italian": "ciao"},
    "thank you": {"spanish": "gracias", "french": "merci", "german": "danke", "hindi": "धन्यवाद", "portuguese": "obrigado", "italian": "grazie"},
    "yes": {"spanish": "sí", "french": "oui", "german": "ja", "hindi": "हाँ", "portuguese": "sim", "italian": "sì"},
    "no": {"spanish": "no", "french": "non", "german": "nein", "hindi": "नहीं", "portuguese": "não", "italian": "no"},
    "i": {"spanish": "yo", "french": "je", "german": "ich", "hindi": "मैं", "portuguese": "eu", "italian": "io"},
    "you": {"spanish": "tú", "french": "tu", "german": "du", "hindi": "तुम", "portuguese": "você", "italian": "tu"},
    "we": {"spanish": "nosotros", "french": "nous", "german": "wir", "hindi": "हम", "portuguese": "nós", "italian": "noi"},
    "love": {"spanish": "amo", "french": "aime", "german": "liebe", "hindi": "प्यार करता हूँ", "portuguese": "amo", "italian": "amo"},
    "like": {"spanish": "gusta", "french": "aime", "german": "mag", "hindi": "पसंद करता हूँ", "portuguese": "gosto", "italian": "piace"},
    "eat": {"spanish": "como", "french": "mange", "german": "esse", "hindi": "खाता हूँ", "portuguese": "como", "italian": "mangio"},
    "drink": {"spanish": "bebo", "french": "bois", "german": "trinke", "hindi": "पीता हूँ", "portuguese": "bebo", "italian": "bevo"},
    "see": {"spanish": "veo", "french": "vois", "german": "sehe", "hindi": "देखता हूँ", "portuguese": "vejo", "italian": "vedo"},
    "cat": {"spanish": "gato", "french": "chat", "german": "Katze", "hindi": "बिल्ली", "portuguese": "gato", "italian": "gatto"},
    "dog": {"spanish": "perro", "french": "chien", "german": "Hund", "hindi": "कुत्ता", "portuguese": "cão", "italian": "cane"},
    "car": {"spanish": "coche", "french": "voiture", "german": "Auto", "hindi": "गाड़ी", "portuguese": "carro", "italian": "macchina"},
    "house": {"spanish": "casa", "french": "maison", "german": "Haus", "hindi": "घर", "portuguese": "casa", "italian": "casa"},
    "water": {"spanish": "agua", "french": "eau", "german": "Wasser", "hindi": "पानी", "portuguese": "água", "italian": "acqua"},
    "food": {"spanish": "comida", "french": "nourriture", "german": "Essen", "hindi": "खाना", "portuguese": "comida", "italian": "cibo"},
    "friend": {"spanish": "amigo", "french": "ami", "german": "Freund", "hindi": "दोस्त", "portuguese": "amigo", "italian": "amico"},
    "apple": {"spanish": "manzana", "french": "pomme", "german": "Apfel", "hindi": "सेब", "portuguese": "maçã", "italian": "mela"},
    "book": {"spanish": "libro", "french": "livre", "german": "Buch", "hindi": "किताब", "portuguese": "livro", "italian": "libro"},
    "red": {"spanish": "rojo", "french": "rouge", "german": "rot", "hindi": "लाल", "portuguese": "vermelho", "italian": "rosso"},
    "big": {"spanish": "grande", "french": "grand", "german": "groß", "hindi": "बड़ा", "portuguese": "grande", "italian": "grande"},
    "small": {"spanish": "pequeño", "french": "petit", "german": "klein", "hindi": "छोटा", "portuguese": "pequeno", "italian": "piccolo"},
    "beautiful": {"spanish": "hermoso", "french": "beau", "german": "schön", "hindi": "सुंदर", "portuguese": "bonito", "italian": "bello"},
    "the": {"spanish": "el", "french": "le", "german": "der", "hindi": "", "portuguese": "o", "italian": "il"},
    "and": {"spanish": "y", "french": "et", "german": "und", "hindi": "और", "portuguese": "e", "italian": "e"},
    "river": {"spanish": "río", "french": "rivière", "german": "Fluss", "hindi": "नदी", "portuguese": "rio", "italian": "fiume"},
    "money": {"spanish": "dinero", "french": "argent", "german": "Geld", "hindi": "पैसा", "portuguese": "dinheiro", "italian": "soldi"},
    "today": {"spanish": "hoy", "french": "aujourd'hui", "german": "heute", "hindi": "आज", "portuguese": "hoje", "italian": "oggi"},
}

PHRASE_ROWS.extend(
    {
        "phrase_key": english.replace(" ", "_"),
        "english": english,
        "category": "vocabulary",
        "translations": {column: value for column, value in translations.items() if value},
    }
    for english, translations in _VOCABULARY.items()
)

WORD_SENSE_ROWS = [
    {
        "word": "bank",
        "sense_id": "bank_financial",
        "meaning": "financial institution",
        "context_clues": ["money", "account", "deposit", "withdraw", "loan", "credit", "atm", "savings", "interest", "mortgage", "finance", "banking", "teller"],
        "translations": {
            "spanish": "banco",
            "french": "banque",
            "german": "Bank",
            "hindi": "बैंक",
            "chinese": "银行",
            "japanese": "銀行",
            "arabic": "بنك",
        },
    },
    {
        "word": "bank",
        "sense_id": "bank_river",
        "meaning": "side of a river",
        "context_clues": ["river", "water", "stream", "fish", "shore", "riverside", "lake", "pond", "creek", "flow"],
        "translations": {
            "spanish": "orilla",
            "french": "rive",
            "german": "Ufer",
            "hindi": "किनारा",
            "chinese": "河岸",
            "japanese": "岸",
            "arabic": "ضفة",
        },
    },
    {
        "word": "bat",
        "sense_id": "bat_animal",
        "meaning": "flying mammal",
        "context_clues": ["fly", "night", "cave", "vampire", "wing", "nocturnal", "animal", "mammal", "echo", "blind"],
        "translations": {
            "spanish": "murciélago",
            "french": "chauve-souris",
            "german": "Fledermaus",
            "hindi": "चमगादड़",
            "chinese": "蝙蝠",
            "japanese": "コウモリ",
            "arabic": "خفاش",
        },
    },
    {
        "word": "bat",
        "sense_id": "bat_sports",
        "meaning": "sports equipment",
        "context_clues": ["baseball", "cricket", "hit", "ball", "swing", "game", "player", "sport", "innings", "pitch", "home run"],
        "translations": {
            "spanish": "bate",
            "french": "batte",
            "german": "Schläger",
            "hindi": "बल्ला",
            "chinese": "球棒",
            "japanese": "バット",
            "arabic": "مضرب",
        },
    },
    {
        "word": "hot",
        "sense_id": "hot_temperature",
        "meaning": "high temperature",
        "context_clues": ["weather", "sun", "summer", "heat", "warm", "cold", "temperature", "fire", "burning", "boiling", "sweat"],
        "translations": {
            "spanish": "caliente",
            "french": "chaud",
            "german": "heiß",
            "hindi": "गर्म",
            "chinese": "热的",
            "japanese": "暑い",
            "arabic": "حار",
        },
    },
    {
        "word": "hot",
        "sense_id": "hot_spicy",
        "meaning": "spicy food",
        "context_clues": ["food", "pepper", "spicy", "chili", "taste", "mouth", "eat", "curry", "sauce", "dish"],
        "translations": {
            "spanish": "picante",
            "french": "épicé",
            "german": "scharf",
            "hindi": "तीखा",
            "chinese": "辣",
            "japanese": "辛い",
            "arabic": "حار",
        },
    },
    {
        "word": "hot",
        "sense_id": "hot_attractive",
        "meaning": "sexually attractive (slang)",
        "context_clues": ["sexy", "attractive", "look", "person", "girl", "guy", "model", "gorgeous", "beautiful"],
        "translations": {
            "spanish": "guapo",
            "french": "sexy",
            "german": "heiß",
            "hindi": "आकर्षक",
            "chinese": "性感",
            "japanese": "セクシー",
            "arabic": "جذاب",
        },
    },
    {
        "word": "run",
        "sense_id": "run_movement",
        "meaning": "move quickly on foot",
        "context_clues": ["fast", "jog", "sprint", "marathon", "race", "exercise", "leg", "foot", "athlete", "track"],
        "translations": {
            "spanish": "correr",
            "french": "courir",
            "german": "laufen",
            "hindi": "दौड़ना",
            "chinese": "跑",
            "japanese": "走る",
            "arabic": "يركض",
        },
    },
    {
        "word": "run",
        "sense_id": "run_operate",
        "meaning": "operate or manage",
        "context_clues": ["business", "company", "manage", "operate", "machine", "program", "software", "engine"],
        "translations": {
            "spanish": "operar",
            "french": "gérer",
            "german": "betreiben",
            "hindi": "चलाना",
            "chinese": "运行",
            "japanese": "運営する",
            "arabic": "يشغل",
        },
    },
    {
        "word": "light",
        "sense_id": "light_illumination",
        "meaning": "electromagnetic radiation",
        "context_clues": ["sun", "lamp", "bright", "dark", "shine", "bulb", "switch", "ray", "beam", "glow"],
        "translations": {
            "spanish": "luz",
            "french": "lumière",
            "german": "Licht",
            "hindi": "रोशनी",
            "chinese": "光",
            "japanese": "光",
            "arabic": "ضوء",
        },
    },
    {
        "word": "light",
        "sense_id": "light_weight",
        "meaning": "not heavy",
        "context_clues": ["weight", "heavy", "carry", "lift", "feather", "kg", "pound", "portable"],
        "translations": {
            "spanish": "ligero",
            "french": "léger",
            "german": "leicht",
            "hindi": "हल्का",
            "chinese": "轻",
            "japanese": "軽い",
            "arabic": "خفيف",
        },
    },
    {
        "word": "spring",
        "sense_id": "spring_season",
        "meaning": "season after winter",
        "context_clues": ["season", "winter", "summer", "flower", "bloom", "april", "march", "weather"],
        "translations": {
            "spanish": "primavera",
            "french": "printemps",
            "german": "Frühling",
            "hindi": "वसंत",
            "chinese": "春天",
            "japanese": "春",
            "arabic": "ربيع",
        },
    },
    {
        "word": "spring",
        "sense_id": "spring_water",
        "meaning": "water source",
        "context_clues": ["water", "natural", "mineral", "fountain", "source", "fresh", "drink"],
        "translations": {
            "spanish": "manantial",
            "french": "source",
            "german": "Quelle",
            "hindi": "झरना",
            "chinese": "泉水",
            "japanese": "泉",
            "arabic": "نبع",
        },
    },
    {
        "word": "spring",
        "sense_id": "spring_coil",
        "meaning": "elastic device",
        "context_clues": ["coil", "bounce", "mattress", "metal", "elastic", "jump", "mechanical"],
        "translations": {
            "spanish": "resorte",
            "french": "ressort",
            "german": "Feder",
            "hindi": "स्प्रिंग",
            "chinese": "弹簧",
            "japanese": "ばね",
            "arabic": "نابض",
        },
    },
    {
        "word": "cold",
        "sense_id": "cold_temperature",
        "meaning": "low temperature",
        "context_clues": ["weather", "winter", "freeze", "ice", "snow", "warm", "hot", "temperature"],
        "translations": {
            "spanish": "frío",
            "french": "froid",
            "german": "kalt",
            "hindi": "ठंडा",
            "chinese": "冷",
            "japanese": "寒い",
            "arabic": "بارد",
        },
    },
    {
        "word": "cold",
        "sense_id": "cold_illness",
        "meaning": "common illness",
        "context_clues": ["sick", "flu", "sneeze", "cough", "fever", "medicine", "doctor", "symptom", "nose"],
        "translations": {
            "spanish": "resfriado",
            "french": "rhume",
            "german": "Erkältung",
            "hindi": "सर्दी",
            "chinese": "感冒",
            "japanese": "風邪",
            "arabic": "زكام",
        },
    },
    {
        "word": "present",
        "sense_id": "present_gift",
        "meaning": "a gift",
        "context_clues": ["gift", "birthday", "christmas", "wrap", "give", "receive", "box", "surprise"],
        "translations": {
            "spanish": "regalo",
            "french": "cadeau",
            "german": "Geschenk",
            "hindi": "उपहार",
            "chinese": "礼物",
            "japanese": "プレゼント",
            "arabic": "هدية",
        },
    },
    {
        "word": "present",
        "sense_id": "present_time",
        "meaning": "current time",
        "context_clues": ["now", "current", "today", "time", "moment", "past", "future", "tense"],
        "translations": {
            "spanish": "presente",
            "french": "présent",
            "german": "Gegenwart",
            "hindi": "वर्तमान",
            "chinese": "现在",
            "japanese": "現在",
            "arabic": "حاضر",
        },
    },
    {
        "word": "fair",
        "sense_id": "fair_just",
        "meaning": "just and equitable",
        "context_clues": ["justice", "equal", "unfair", "right", "honest", "treatment", "judge"],
        "translations": {
            "spanish": "justo",
            "french": "juste",
            "german": "fair",
            "hindi": "निष्पक्ष",
            "chinese": "公平",
            "japanese": "公正な",
            "arabic": "عادل",
        },
    },
    {
        "word": "fair",
        "sense_id": "fair_event",
        "meaning": "carnival or exhibition",
        "context_clues": ["carnival", "exhibition", "ride", "booth", "festival", "county", "fun"],
        "translations": {
            "spanish": "feria",
            "french": "foire",
            "german": "Messe",
            "hindi": "मेला",
            "chinese": "集市",
            "japanese": "フェア",
            "arabic": "معرض",
        },
    },
    {
        "word": "fair",
        "sense_id": "fair_light",
        "meaning": "light colored (skin/hair)",
        "context_clues": ["skin", "hair", "complexion", "light", "pale", "blonde", "color"],
        "translations": {
            "spanish": "claro",
            "french": "clair",
            "german": "hell",
            "hindi": "गोरा",
            "chinese": "白皙",
            "japanese": "色白の",
            "arabic": "فاتح",
        },
    },
]
