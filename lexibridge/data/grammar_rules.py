"""Default grammar profiles used when the store has no row for a language."""

GRAMMAR_RULE_ROWS = [
    {"language_code": "en", "language_name": "English", "word_order": "SVO", "has_gender": False, "has_articles": True, "adjective_position": "before", "uses_postpositions": False, "subject_dropping": False, "has_cases": False, "has_honorific": False},
    {"language_code": "es", "language_name": "Spanish", "word_order": "SVO", "has_gender": True, "has_articles": True, "adjective_position": "after", "uses_postpositions": False, "subject_dropping": True, "has_cases": False, "has_honorific": True},
    {"language_code": "fr", "language_name": "French", "word_order": "SVO", "has_gender": True, "has_articles": True, "adjective_position": "after", "uses_postpositions": False, "subject_dropping": False, "has_cases": False, "has_honorific": True},
    {"language_code": "de", "language_name": "German", "word_order": "SVO", "has_gender": True, "has_articles": True, "adjective_position": "before", "uses_postpositions": False, "subject_dropping": False, "has_cases": True, "has_honorific": True},
    {"language_code": "hi", "language_name": "Hindi", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "bn", "language_name": "Bengali", "word_order": "SOV", "has_gender": False, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "ta", "language_name": "Tamil", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "te", "language_name": "Telugu", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "kn", "language_name": "Kannada", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "ml", "language_name": "Malayalam", "word_order": "SOV", "has_gender": False, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "gu", "language_name": "Gujarati", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "mr", "language_name": "Marathi", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "pa", "language_name": "Punjabi", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "ur", "language_name": "Urdu", "word_order": "SOV", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "zh", "language_name": "Chinese", "word_order": "SVO", "has_gender": False, "has_articles": False, "adjective_position": "before", "uses_postpositions": False, "subject_dropping": True, "has_cases": False, "has_honorific": True},
    {"language_code": "ja", "language_name": "Japanese", "word_order": "SOV", "has_gender": False, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True, "sentence_end_particle": "です/ます"},
    {"language_code": "ko", "language_name": "Korean", "word_order": "SOV", "has_gender": False, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "ar", "language_name": "Arabic", "word_order": "VSO", "has_gender": True, "has_articles": True, "adjective_position": "after", "uses_postpositions": False, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "ru", "language_name": "Russian", "word_order": "SVO", "has_gender": True, "has_articles": False, "adjective_position": "before", "uses_postpositions": False, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "tr", "language_name": "Turkish", "word_order": "SOV", "has_gender": False, "has_articles": False, "adjective_position": "before", "uses_postpositions": True, "subject_dropping": True, "has_cases": True, "has_honorific": True},
    {"language_code": "th", "language_name": "Thai", "word_order": "SVO", "has_gender": False, "has_articles": False, "adjective_position": "after", "uses_postpositions": False, "subject_dropping": True, "has_cases": False, "has_honorific": True},
    {"language_code": "vi", "language_name": "Vietnamese", "word_order": "SVO", "has_gender": False, "has_articles": False, "adjective_position": "after", "uses_postpositions": False, "subject_dropping": True, "has_cases": False, "has_honorific": True},
    {"language_code": "id", "language_name": "Indonesian", "word_order": "SVO", "has_gender": False, "has_articles": False, "adjective_position": "after", "uses_postpositions": False, "subject_dropping": True, "has_cases": False, "has_honorific": True},
]

# Used for languages without a profile in the store or above
DEFAULT_GRAMMAR_ROW = {
    "language_code": "xx",
    "language_name": "Generic",
    "word_order": "SVO",
    "has_gender": False,
    "has_articles": False,
    "adjective_position": "before",
    "uses_postpositions": False,
    "subject_dropping": False,
    "has_cases": False,
    "has_honorific": False,
}
