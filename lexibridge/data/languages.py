"""Language catalogue backing the language registry.

Each row is ``(code, name, native_name, script)``. An empty script means the
script is inferred from the native name at registry build time.
"""

LANGUAGES = [
    ("hi", "Hindi", "हिन्दी", "Devanagari"),
    ("bn", "Bengali", "বাংলা", "Bengali"),
    ("te", "Telugu", "తెలుగు", "Telugu"),
    ("ta", "Tamil", "தமிழ்", "Tamil"),
    ("mr", "Marathi", "मराठी", "Devanagari"),
    ("gu", "Gujarati", "ગુજરાતી", "Gujarati"),
    ("kn", "Kannada", "ಕನ್ನಡ", "Kannada"),
    ("ml", "Malayalam", "മലയാളം", "Malayalam"),
    ("pa", "Punjabi", "ਪੰਜਾਬੀ", "Gurmukhi"),
    ("or", "Odia", "ଓଡ଼ିଆ", "Odia"),
    ("as", "Assamese", "অসমীয়া", "Bengali"),
    ("ur", "Urdu", "اردو", "Arabic"),
    ("sa", "Sanskrit", "संस्कृतम्", "Devanagari"),
    ("ks", "Kashmiri", "कश्मीरी", "Devanagari"),
    ("sd", "Sindhi", "سنڌي", "Arabic"),
    ("ne", "Nepali", "नेपाली", "Devanagari"),
    ("kok", "Konkani", "कोंकणी", "Devanagari"),
    ("mai", "Maithili", "मैथिली", "Devanagari"),
    ("sat", "Santali", "ᱥᱟᱱᱛᱟᱲᱤ", "Ol Chiki"),
    ("brx", "Bodo", "बड़ो", "Devanagari"),
    ("doi", "Dogri", "डोगरी", "Devanagari"),
    ("mni", "Manipuri", "মণিপুরী", "Bengali"),
    ("bho", "Bhojpuri", "भोजपुरी", "Devanagari"),
    ("raj", "Rajasthani", "राजस्थानी", "Devanagari"),
    ("mag", "Magahi", "मगही", "Devanagari"),
    ("awa", "Awadhi", "अवधी", "Devanagari"),
    ("hne", "Chhattisgarhi", "छत्तीसगढ़ी", "Devanagari"),
    ("mar", "Marwari", "मारवाड़ी", "Devanagari"),
    ("bgc", "Haryanvi", "हरियाणवी", "Devanagari"),
    ("kfy", "Kumaoni", "कुमाऊँनी", "Devanagari"),
    ("gbm", "Garhwali", "गढ़वाली", "Devanagari"),
    ("lus", "Mizo", "Mizo ṭawng", "Latin"),
    ("kha", "Khasi", "Ka Ktien Khasi", "Latin"),
    ("grt", "Garo", "A·chik", "Latin"),
    ("tcy", "Tulu", "ತುಳು", "Kannada"),
    ("gom", "Goan Konkani", "गोंयची कोंकणी", "Devanagari"),
    ("en", "English", "English", "Latin"),
    ("es", "Spanish", "Español", "Latin"),
    ("fr", "French", "Français", "Latin"),
    ("de", "German", "Deutsch", "Latin"),
    ("it", "Italian", "Italiano", "Latin"),
    ("pt", "Portuguese", "Português", "Latin"),
    ("nl", "Dutch", "Nederlands", "Latin"),
    ("ru", "Russian", "Русский", "Cyrillic"),
    ("pl", "Polish", "Polski", "Latin"),
    ("uk", "Ukrainian", "Українська", "Cyrillic"),
    ("cs", "Czech", "Čeština", "Latin"),
    ("ro", "Romanian", "Română", "Latin"),
    ("hu", "Hungarian", "Magyar", "Latin"),
    ("el", "Greek", "Ελληνικά", "Greek"),
    ("sv", "Swedish", "Svenska", "Latin"),
    ("no", "Norwegian", "Norsk", "Latin"),
    ("da", "Danish", "Dansk", "Latin"),
    ("fi", "Finnish", "Suomi", "Latin"),
    ("zh", "Chinese", "中文", "Han"),
    ("ja", "Japanese", "日本語", "Japanese"),
    ("ko", "Korean", "한국어", "Hangul"),
    ("th", "Thai", "ไทย", "Thai"),
    ("vi", "Vietnamese", "Tiếng Việt", "Latin"),
    ("id", "Indonesian", "Bahasa Indonesia", "Latin"),
    ("ms", "Malay", "Bahasa Melayu", "Latin"),
    ("tl", "Tagalog", "Tagalog", "Latin"),
    ("my", "Burmese", "မြန်မာစာ", "Myanmar"),
    ("km", "Khmer", "ភាសាខ្មែរ", "Khmer"),
    ("lo", "Lao", "ພາສາລາວ", "Lao"),
    ("ar", "Arabic", "العربية", "Arabic"),
    ("fa", "Persian", "فارسی", "Arabic"),
    ("he", "Hebrew", "עברית", "Hebrew"),
    ("tr", "Turkish", "Türkçe", "Latin"),
    ("sw", "Swahili", "Kiswahili", "Latin"),
    ("am", "Amharic", "አማርኛ", "Ethiopic"),
    ("ha", "Hausa", "Hausa", "Latin"),
    ("yo", "Yoruba", "Yorùbá", "Latin"),
    ("ig", "Igbo", "Igbo", "Latin"),
    ("zu", "Zulu", "isiZulu", "Latin"),
    ("aa", "Afar", "Afaraf", ""),
    ("ab", "Abkhazian", "Аҧсуа", ""),
    ("af", "Afrikaans", "Afrikaans", ""),
    ("ak", "Akan", "Akan", ""),
    ("an", "Aragonese", "Aragonés", ""),
    ("av", "Avaric", "Авар", ""),
    ("ay", "Aymara", "Aymar", ""),
    ("az", "Azerbaijani", "Azərbaycan", ""),
    ("ba", "Bashkir", "Башҡорт", ""),
    ("be", "Belarusian", "Беларуская", ""),
    ("bg", "Bulgarian", "Български", ""),
    ("bh", "Bihari", "भोजपुरी", ""),
    ("bi", "Bislama", "Bislama", ""),
    ("bm", "Bambara", "Bamanankan", ""),
    ("bo", "Tibetan", "བོད་ཡིག", ""),
    ("br", "Breton", "Brezhoneg", ""),
    ("bs", "Bosnian", "Bosanski", ""),
    ("ca", "Catalan", "Català", ""),
    ("ce", "Chechen", "Нохчийн", ""),
    ("ch", "Chamorro", "Chamoru", ""),
    ("co", "Corsican", "Corsu", ""),
    ("cr", "Cree", "ᓀᐦᐃᔭᐍᐏᐣ", ""),
    ("cu", "Church Slavic", "Словѣньскъ", ""),
    ("cv", "Chuvash", "Чӑваш", ""),
    ("cy", "Welsh", "Cymraeg", ""),
    ("dv", "Divehi", "ދިވެހި", ""),
    ("chr", "Cherokee", "ᏣᎳᎩ", "Cherokee"),
    ("dz", "Dzongkha", "རྫོང་ཁ", ""),
    ("ee", "Ewe", "Eʋegbe", ""),
    ("eo", "Esperanto", "Esperanto", ""),
    ("et", "Estonian", "Eesti", ""),
    ("eu", "Basque", "Euskara", ""),
    ("ff", "Fulah", "Fulfulde", ""),
    ("fj", "Fijian", "Vosa Vakaviti", ""),
    ("fo", "Faroese", "Føroyskt", ""),
    ("fy", "Western Frisian", "Frysk", ""),
    ("ga", "Irish", "Gaeilge", ""),
    ("gd", "Scottish Gaelic", "Gàidhlig", ""),
    ("gl", "Galician", "Galego", ""),
    ("gn", "Guarani", "Avañe'ẽ", ""),
    ("gv", "Manx", "Gaelg", ""),
    ("ho", "Hiri Motu", "Hiri Motu", ""),
    ("hr", "Croatian", "Hrvatski", ""),
    ("ht", "Haitian Creole", "Kreyòl Ayisyen", ""),
    ("hy", "Armenian", "Հայերեն", ""),
    ("hz", "Herero", "Otjiherero", ""),
    ("ia", "Interlingua", "Interlingua", ""),
    ("ie", "Interlingue", "Interlingue", ""),
    ("ii", "Sichuan Yi", "ꆈꌠꉙ", ""),
    ("ik", "Inupiaq", "Iñupiaq", ""),
    ("io", "Ido", "Ido", ""),
    ("is", "Icelandic", "Íslenska", ""),
    ("iu", "Inuktitut", "ᐃᓄᒃᑎᑐᑦ", ""),
    ("jv", "Javanese", "Basa Jawa", ""),
    ("ka", "Georgian", "ქართული", ""),
    ("kg", "Kongo", "Kikongo", ""),
    ("ki", "Kikuyu", "Gĩkũyũ", ""),
    ("kj", "Kuanyama", "Kuanyama", ""),
    ("kk", "Kazakh", "Қазақша", ""),
    ("kl", "Kalaallisut", "Kalaallisut", ""),
    ("kr", "Kanuri", "Kanuri", ""),
    ("ku", "Kurdish", "Kurdî", ""),
    ("kv", "Komi", "Коми", ""),
    ("kw", "Cornish", "Kernewek", ""),
    ("ky", "Kyrgyz", "Кыргызча", ""),
    ("la", "Latin", "Latina", ""),
    ("lb", "Luxembourgish", "Lëtzebuergesch", ""),
    ("lg", "Ganda", "Luganda", ""),
    ("li", "Limburgish", "Limburgs", ""),
    ("ln", "Lingala", "Lingála", ""),
    ("lt", "Lithuanian", "Lietuvių", ""),
    ("lu", "Luba-Katanga", "Kiluba", ""),
    ("lv", "Latvian", "Latviešu", ""),
    ("mg", "Malagasy", "Malagasy", ""),
    ("mh", "Marshallese", "Kajin M̧ajeļ", ""),
    ("mi", "Maori", "Te Reo Māori", ""),
    ("mk", "Macedonian", "Македонски", ""),
    ("mn", "Mongolian", "Монгол", ""),
    ("mt", "Maltese", "Malti", ""),
    ("na", "Nauru", "Dorerin Naoero", ""),
    ("nb", "Norwegian Bokmål", "Norsk Bokmål", ""),
    ("nd", "North Ndebele", "isiNdebele", ""),
    ("ng", "Ndonga", "Owambo", ""),
    ("nn", "Norwegian Nynorsk", "Norsk Nynorsk", ""),
    ("nr", "South Ndebele", "isiNdebele", ""),
    ("nv", "Navajo", "Diné Bizaad", ""),
    ("ny", "Chichewa", "Chichewa", ""),
    ("oc", "Occitan", "Occitan", ""),
    ("oj", "Ojibwa", "ᐊᓂᔑᓈᐯᒧᐎᓐ", ""),
    ("om", "Oromo", "Afaan Oromoo", ""),
    ("os", "Ossetian", "Ирон", ""),
    ("pi", "Pali", "पालि", ""),
    ("ps", "Pashto", "پښتو", ""),
    ("qu", "Quechua", "Runa Simi", ""),
    ("rm", "Romansh", "Rumantsch", ""),
    ("rn", "Rundi", "Ikirundi", ""),
    ("rw", "Kinyarwanda", "Ikinyarwanda", ""),
    ("sc", "Sardinian", "Sardu", ""),
    ("se", "Northern Sami", "Davvisámegiella", ""),
    ("sg", "Sango", "Sängö", ""),
    ("si", "Sinhala", "සිංහල", ""),
    ("sk", "Slovak", "Slovenčina", ""),
    ("sl", "Slovenian", "Slovenščina", ""),
    ("sm", "Samoan", "Gagana Sāmoa", ""),
    ("sn", "Shona", "chiShona", ""),
    ("so", "Somali", "Soomaali", ""),
    ("sq", "Albanian", "Shqip", ""),
    ("sr", "Serbian", "Српски", ""),
    ("ss", "Swati", "SiSwati", ""),
    ("st", "Southern Sotho", "Sesotho", ""),
    ("su", "Sundanese", "Basa Sunda", ""),
    ("tg", "Tajik", "Тоҷикӣ", ""),
    ("ti", "Tigrinya", "ትግርኛ", ""),
    ("tk", "Turkmen", "Türkmençe", ""),
    ("tn", "Tswana", "Setswana", ""),
    ("to", "Tongan", "Lea Faka-Tonga", ""),
    ("ts", "Tsonga", "Xitsonga", ""),
    ("tt", "Tatar", "Татарча", ""),
    ("tw", "Twi", "Twi", ""),
    ("ty", "Tahitian", "Reo Tahiti", ""),
    ("ug", "Uyghur", "ئۇيغۇرچە", ""),
    ("uz", "Uzbek", "Oʻzbek", ""),
    ("ve", "Venda", "Tshivenḓa", ""),
    ("vo", "Volapük", "Volapük", ""),
    ("wa", "Walloon", "Walon", ""),
    ("wo", "Wolof", "Wolof", ""),
    ("xh", "Xhosa", "isiXhosa", ""),
    ("yi", "Yiddish", "ייִדיש", ""),
    ("za", "Zhuang", "Saɯ Cueŋƅ", ""),
]

# Scripts written right-to-left
RTL_SCRIPTS = {"Arabic", "Hebrew", "Thaana", "Syriac", "Nko"}

# Common alternative names
LANGUAGE_ALIASES = {
    "bangla": "bengali",
    "oriya": "odia",
    "farsi": "persian",
    "mandarin": "chinese",
    "chinese (mandarin)": "chinese",
    "hindustani": "hindi",
    "filipino": "tagalog",
    "panjabi": "punjabi",
    "sinhalese": "sinhala",
    "myanmar": "burmese",
    "hangul": "korean",
    "nihongo": "japanese",
}

# Nearest supported language for dialects, keyed by script
SCRIPT_FALLBACK = {
    "Devanagari": "hindi",
    "Bengali": "bengali",
    "Tamil": "tamil",
    "Telugu": "telugu",
    "Kannada": "kannada",
    "Malayalam": "malayalam",
    "Gujarati": "gujarati",
    "Gurmukhi": "punjabi",
    "Odia": "odia",
    "Arabic": "arabic",
    "Cyrillic": "russian",
    "Greek": "greek",
    "Hebrew": "hebrew",
    "Thai": "thai",
    "Han": "chinese",
    "Japanese": "japanese",
    "Hangul": "korean",
    "Georgian": "georgian",
    "Armenian": "armenian",
    "Ethiopic": "amharic",
    "Myanmar": "burmese",
    "Khmer": "khmer",
    "Lao": "lao",
    "Sinhala": "sinhala",
    "Tibetan": "hindi",
    "Latin": "english",
}

# Ordered: the first matching script wins. Ranges are inclusive code points.
SCRIPT_PATTERNS = [
    # South Asian
    ("Devanagari", "hindi", [(0x0900, 0x097F)]),
    ("Bengali", "bengali", [(0x0980, 0x09FF)]),
    ("Tamil", "tamil", [(0x0B80, 0x0BFF)]),
    ("Telugu", "telugu", [(0x0C00, 0x0C7F)]),
    ("Kannada", "kannada", [(0x0C80, 0x0CFF)]),
    ("Malayalam", "malayalam", [(0x0D00, 0x0D7F)]),
    ("Gujarati", "gujarati", [(0x0A80, 0x0AFF)]),
    ("Gurmukhi", "punjabi", [(0x0A00, 0x0A7F)]),
    ("Odia", "odia", [(0x0B00, 0x0B7F)]),
    ("Sinhala", "sinhala", [(0x0D80, 0x0DFF)]),
    ("Tibetan", "tibetan", [(0x0F00, 0x0FFF)]),
    ("Ol Chiki", "santali", [(0x1C50, 0x1C7F)]),
    # East Asian
    ("Han", "chinese", [(0x4E00, 0x9FFF), (0x3400, 0x4DBF)]),
    ("Japanese", "japanese", [(0x3040, 0x309F), (0x30A0, 0x30FF)]),
    ("Hangul", "korean", [(0xAC00, 0xD7AF), (0x1100, 0x11FF)]),
    # Southeast Asian
    ("Thai", "thai", [(0x0E00, 0x0E7F)]),
    ("Lao", "lao", [(0x0E80, 0x0EFF)]),
    ("Myanmar", "burmese", [(0x1000, 0x109F)]),
    ("Khmer", "khmer", [(0x1780, 0x17FF)]),
    # Middle Eastern
    ("Arabic", "arabic", [(0x0600, 0x06FF), (0x0750, 0x077F), (0x08A0, 0x08FF)]),
    ("Hebrew", "hebrew", [(0x0590, 0x05FF)]),
    ("Thaana", "divehi", [(0x0780, 0x07BF)]),
    # European
    ("Cyrillic", "russian", [(0x0400, 0x04FF)]),
    ("Greek", "greek", [(0x0370, 0x03FF), (0x1F00, 0x1FFF)]),
    # Caucasian
    ("Georgian", "georgian", [(0x10A0, 0x10FF)]),
    ("Armenian", "armenian", [(0x0530, 0x058F)]),
    # African
    ("Ethiopic", "amharic", [(0x1200, 0x137F), (0x1380, 0x139F)]),
    # Native American
    ("Cherokee", "cherokee", [(0x13A0, 0x13FF)]),
    ("Canadian Syllabics", "cree", [(0x1400, 0x167F)]),
    # Central Asian
    ("Mongolian", "mongolian", [(0x1800, 0x18AF)]),
]

# Languages with a column in the phrase table
SUPPORTED_PHRASE_LANGUAGES = {
    "hindi", "bengali", "telugu", "tamil", "kannada", "malayalam",
    "marathi", "gujarati", "punjabi", "odia", "urdu", "arabic",
    "spanish", "french", "portuguese", "russian", "japanese", "korean",
    "chinese", "thai", "vietnamese", "indonesian", "turkish",
    "persian", "english", "german", "italian",
}

# Language name -> phrase table column
LANGUAGE_TO_COLUMN = {name: name for name in SUPPORTED_PHRASE_LANGUAGES}
