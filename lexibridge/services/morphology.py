"""
English-pivot morphology.

Lemmatization, stemming, number and tense inflection, and part-of-speech
guessing for English word forms. The dictionary stage uses the lemma to
retry a lookup when the surface form has no entry.
"""

import re
from typing import Dict, Optional, Tuple

from lexibridge.models.internal_models import MorphologicalFeatures, PartOfSpeech, Tense

# infinitive -> (past, past participle)
IRREGULAR_VERBS: Dict[str, Tuple[str, str]] = {
    "be": ("was/were", "been"),
    "have": ("had", "had"),
    "do": ("did", "done"),
    "go": ("went", "gone"),
    "come": ("came", "come"),
    "see": ("saw", "seen"),
    "take": ("took", "taken"),
    "get": ("got", "gotten"),
    "make": ("made", "made"),
    "know": ("knew", "known"),
    "think": ("thought", "thought"),
    "say": ("said", "said"),
    "give": ("gave", "given"),
    "find": ("found", "found"),
    "tell": ("told", "told"),
    "feel": ("felt", "felt"),
    "become": ("became", "become"),
    "leave": ("left", "left"),
    "put": ("put", "put"),
    "keep": ("kept", "kept"),
    "let": ("let", "let"),
    "begin": ("began", "begun"),
    "seem": ("seemed", "seemed"),
    "help": ("helped", "helped"),
    "show": ("showed", "shown"),
    "hear": ("heard", "heard"),
    "play": ("played", "played"),
    "run": ("ran", "run"),
    "move": ("moved", "moved"),
    "live": ("lived", "lived"),
    "believe": ("believed", "believed"),
    "bring": ("brought", "brought"),
    "happen": ("happened", "happened"),
    "write": ("wrote", "written"),
    "sit": ("sat", "sat"),
    "stand": ("stood", "stood"),
    "lose": ("lost", "lost"),
    "pay": ("paid", "paid"),
    "meet": ("met", "met"),
    "include": ("included", "included"),
    "continue": ("continued", "continued"),
    "set": ("set", "set"),
    "learn": ("learned", "learned"),
    "change": ("changed", "changed"),
    "lead": ("led", "led"),
    "understand": ("understood", "understood"),
    "watch": ("watched", "watched"),
    "follow": ("followed", "followed"),
    "stop": ("stopped", "stopped"),
    "create": ("created", "created"),
    "speak": ("spoke", "spoken"),
    "read": ("read", "read"),
    "spend": ("spent", "spent"),
    "grow": ("grew", "grown"),
    "open": ("opened", "opened"),
    "walk": ("walked", "walked"),
    "win": ("won", "won"),
    "offer": ("offered", "offered"),
    "remember": ("remembered", "remembered"),
    "love": ("loved", "loved"),
    "consider": ("considered", "considered"),
    "appear": ("appeared", "appeared"),
    "buy": ("bought", "bought"),
    "wait": ("waited", "waited"),
    "serve": ("served", "served"),
    "die": ("died", "died"),
    "send": ("sent", "sent"),
    "expect": ("expected", "expected"),
    "build": ("built", "built"),
    "stay": ("stayed", "stayed"),
    "fall": ("fell", "fallen"),
    "cut": ("cut", "cut"),
    "reach": ("reached", "reached"),
    "kill": ("killed", "killed"),
    "remain": ("remained", "remained"),
    "eat": ("ate", "eaten"),
    "sleep": ("slept", "slept"),
    "drink": ("drank", "drunk"),
    "swim": ("swam", "swum"),
    "drive": ("drove", "driven"),
    "fly": ("flew", "flown"),
    "break": ("broke", "broken"),
    "choose": ("chose", "chosen"),
    "forget": ("forgot", "forgotten"),
    "hide": ("hid", "hidden"),
    "ride": ("rode", "ridden"),
    "ring": ("rang", "rung"),
    "rise": ("rose", "risen"),
    "shake": ("shook", "shaken"),
    "sing": ("sang", "sung"),
    "sink": ("sank", "sunk"),
    "steal": ("stole", "stolen"),
    "strike": ("struck", "struck"),
    "tear": ("tore", "torn"),
    "throw": ("threw", "thrown"),
    "wake": ("woke", "woken"),
    "wear": ("wore", "worn"),
}

IRREGULAR_PLURALS: Dict[str, str] = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "mouse": "mice",
    "louse": "lice",
    "ox": "oxen",
    "sheep": "sheep",
    "deer": "deer",
    "fish": "fish",
    "species": "species",
    "series": "series",
    "aircraft": "aircraft",
    "knife": "knives",
    "wife": "wives",
    "life": "lives",
    "leaf": "leaves",
    "half": "halves",
    "wolf": "wolves",
    "calf": "calves",
    "loaf": "loaves",
    "thief": "thieves",
    "self": "selves",
    "shelf": "shelves",
    "elf": "elves",
    "analysis": "analyses",
    "basis": "bases",
    "crisis": "crises",
    "thesis": "theses",
    "phenomenon": "phenomena",
    "criterion": "criteria",
    "datum": "data",
    "medium": "media",
    "forum": "forums",
    "curriculum": "curricula",
    "bacterium": "bacteria",
    "cactus": "cacti",
    "focus": "foci",
    "fungus": "fungi",
    "nucleus": "nuclei",
    "radius": "radii",
    "stimulus": "stimuli",
    "syllabus": "syllabi",
}

PLURALS_TO_SINGULAR: Dict[str, str] = {plural: singular for singular, plural in IRREGULAR_PLURALS.items()}

_IRREGULAR_FORMS: Dict[str, str] = {}
for _infinitive, (_past, _participle) in IRREGULAR_VERBS.items():
    for _form in _past.split("/") + [_participle]:
        _IRREGULAR_FORMS.setdefault(_form, _infinitive)

STEM_SUFFIXES = [
    "ational", "tional", "ization", "fulness", "ousness", "iveness",
    "ement", "ness", "ment", "able", "ible", "ally", "ance", "ence",
    "ism", "ity", "ous", "ive", "ful", "less", "ing", "tion", "sion",
    "ed", "ly", "er", "est", "en", "s",
]

NOUN_SUFFIXES = ["tion", "sion", "ness", "ment", "ity", "ance", "ence", "er", "or", "ist", "ism"]
VERB_SUFFIXES = ["ize", "ify", "ate", "en"]
ADJ_SUFFIXES = ["ful", "less", "ous", "ive", "able", "ible", "al", "ical", "ic", "ish"]
ADV_SUFFIXES = ["ly"]

DETERMINERS = {
    "the", "a", "an", "this", "that", "these", "those", "my", "your", "his", "her",
    "its", "our", "their", "some", "any", "no", "every", "each", "all", "both",
    "few", "many", "much", "several",
}
PRONOUNS = {
    "i", "me", "my", "mine", "myself", "you", "your", "yours", "yourself", "he",
    "him", "his", "himself", "she", "her", "hers", "herself", "it", "its", "itself",
    "we", "us", "our", "ours", "ourselves", "they", "them", "their", "theirs",
    "themselves", "who", "whom", "whose", "which", "what", "that", "whoever",
    "whomever", "whatever", "whichever",
}
PREPOSITIONS = {
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "about", "into",
    "over", "after", "beneath", "under", "above", "below", "between", "among",
    "through", "during", "before", "behind", "beyond", "near", "across", "around",
    "against", "along", "beside", "towards", "without", "within",
}
CONJUNCTIONS = {
    "and", "but", "or", "nor", "for", "yet", "so", "because", "although", "while",
    "if", "when", "where", "unless", "until", "since", "though", "whether",
    "whereas", "whenever", "wherever", "however", "moreover", "therefore", "thus",
    "hence", "otherwise", "nevertheless", "furthermore", "besides", "consequently",
}
COMMON_VERBS = {
    "be", "is", "am", "are", "was", "were", "been", "being", "have", "has", "had",
    "having", "do", "does", "did", "doing", "done", "will", "would", "shall",
    "should", "may", "might", "must", "can", "could", "go", "goes", "went", "gone",
    "going", "get", "gets", "got", "gotten", "getting", "make", "makes", "made",
    "making", "see", "sees", "saw", "seen", "seeing", "know", "knows", "knew",
    "known", "knowing", "take", "takes", "took", "taken", "taking", "come", "comes",
    "came", "coming", "think", "thinks", "thought", "thinking", "say", "says",
    "said", "saying", "give", "gives", "gave", "given", "giving", "find", "finds",
    "found", "finding", "tell", "tells", "told", "telling", "want", "wants",
    "wanted", "wanting", "use", "uses", "used", "using", "try", "tries", "tried",
    "trying", "ask", "asks", "asked", "asking", "need", "needs", "needed",
    "needing", "feel", "feels", "felt", "feeling", "become", "becomes", "became",
    "becoming", "leave", "leaves", "left", "leaving", "put", "puts", "putting",
    "mean", "means", "meant", "meaning", "keep", "keeps", "kept", "keeping", "let",
    "lets", "letting", "begin", "begins", "began", "begun", "beginning", "seem",
    "seems", "seemed", "seeming", "help", "helps", "helped", "helping", "show",
    "shows", "showed", "shown", "showing", "hear", "hears", "heard", "hearing",
    "play", "plays", "played", "playing", "run", "runs", "ran", "running", "move",
    "moves", "moved", "moving", "like", "likes", "liked", "liking", "live", "lives",
    "lived", "living", "believe", "believes", "believed", "believing", "hold",
    "holds", "held", "holding", "bring", "brings", "brought", "bringing", "happen",
    "happens", "happened", "happening", "write", "writes", "wrote", "written",
    "writing", "sit", "sits", "sat", "sitting", "stand", "stands", "stood",
    "standing", "lose", "loses", "lost", "losing", "pay", "pays", "paid", "paying",
    "meet", "meets", "met", "meeting",
    # Seed vocabulary verbs
    "love", "loves", "loved", "loving", "eat", "eats", "ate", "eaten", "eating",
    "drink", "drinks", "drank", "drunk", "drinking",
}

_CLOSED_CLASS = DETERMINERS | PRONOUNS | PREPOSITIONS | CONJUNCTIONS
_KNOWN_VERBS = set(IRREGULAR_VERBS) | COMMON_VERBS

_VOWEL_CONSONANT_END = re.compile(r"[aeiou][bcdfghjklmnpqrstvwxyz]$")
_SILENT_E_END = re.compile(r"(?:^|[^aeiou])[aeiou][cgkmsvz]$")
_CONSONANT_Y_END = re.compile(r"[^aeiou]y$")
_NO_UNDOUBLE = set("lsfz")


def stem_word(word: str) -> str:
    """Strip the first matching derivational or inflectional suffix"""
    stem = word.lower()
    for suffix in STEM_SUFFIXES:
        if stem.endswith(suffix) and len(stem) > len(suffix) + 2:
            stem = stem[:-len(suffix)]
            break

    if len(stem) > 3 and stem[-1] == stem[-2]:
        stem = stem[:-1]
    return stem


def _undouble(base: str) -> str:
    if len(base) > 2 and base[-1] == base[-2] and base[-1] not in _NO_UNDOUBLE:
        return base[:-1]
    return base


def _restore_base(base: str, undoubled: bool) -> str:
    if base + "e" in _KNOWN_VERBS:
        return base + "e"
    if base in _KNOWN_VERBS or undoubled:
        return base
    if _SILENT_E_END.search(base):
        return base + "e"
    return base


def _has_vowel(text: str) -> bool:
    return any(c in "aeiouy" for c in text)


def _verb_lemma(lower: str) -> Optional[str]:
    if lower.endswith("ing") and len(lower) > 4:
        base = lower[:-3]
        if not _has_vowel(base):
            return None
        undoubled = _undouble(base)
        return _restore_base(undoubled, undoubled != base)

    if lower.endswith("ed") and len(lower) > 3 and not lower.endswith("eed"):
        if lower.endswith("ied") and len(lower) > 4:
            return lower[:-3] + "y"
        base = lower[:-2]
        if base + "e" in _KNOWN_VERBS:
            return base + "e"
        if len(base) < 3 or not _has_vowel(base):
            return None
        undoubled = _undouble(base)
        return _restore_base(undoubled, undoubled != base)

    return None


def _noun_lemma(lower: str) -> Optional[str]:
    if not lower.endswith("s") or lower.endswith("ss") or len(lower) <= 3:
        return None
    if lower.endswith("ies") and len(lower) > 4:
        return lower[:-3] + "y"
    if lower.endswith(("ses", "xes", "zes", "ches", "shes", "oes")):
        return lower[:-2]
    return lower[:-1]


def get_lemma(word: str, pos: Optional[PartOfSpeech] = None) -> str:
    """
    Dictionary form of an English word.

    Args:
        word: Surface form
        pos: Optional part of speech narrowing which rules apply

    Returns:
        Lowercase lemma; the word itself when no rule applies
    """
    lower = word.lower()

    if lower in _IRREGULAR_FORMS and pos != PartOfSpeech.NOUN:
        return _IRREGULAR_FORMS[lower]
    if lower in PLURALS_TO_SINGULAR and pos != PartOfSpeech.VERB:
        return PLURALS_TO_SINGULAR[lower]
    if lower in _CLOSED_CLASS or lower in IRREGULAR_VERBS:
        return lower

    if pos != PartOfSpeech.NOUN:
        lemma = _verb_lemma(lower)
        if lemma:
            return lemma
        if lower.endswith("es") and lower[:-2] in _KNOWN_VERBS:
            return lower[:-2]

    if pos != PartOfSpeech.VERB or lower.endswith("s"):
        lemma = _noun_lemma(lower)
        if lemma:
            return lemma

    return lower


def pluralize(word: str) -> str:
    lower = word.lower()
    if lower in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[lower]
    if _CONSONANT_Y_END.search(lower):
        return lower[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return lower + "es"
    if lower.endswith("fe"):
        return lower[:-2] + "ves"
    if lower.endswith("f"):
        return lower[:-1] + "ves"
    return lower + "s"


def singularize(word: str) -> str:
    lower = word.lower()
    if lower in PLURALS_TO_SINGULAR:
        return PLURALS_TO_SINGULAR[lower]
    if lower.endswith("ies"):
        return lower[:-3] + "y"
    if lower.endswith("ves"):
        return lower[:-3] + "f"
    if lower.endswith(("sses", "xes", "zes", "ches", "shes")):
        return lower[:-2]
    if lower.endswith("s") and not lower.endswith("ss"):
        return lower[:-1]
    return lower


def conjugate_verb(
    infinitive: str,
    tense: Tense,
    person: int = 3,
    number: str = "singular"
) -> str:
    """
    Inflect an English infinitive.

    Args:
        infinitive: Base form of the verb
        tense: Target tense
        person: 1, 2 or 3
        number: "singular" or "plural"

    Returns:
        Inflected lowercase form
    """
    lower = infinitive.lower()
    irregular = IRREGULAR_VERBS.get(lower)

    if tense == Tense.PAST:
        if irregular:
            past = irregular[0]
            if "/" in past:
                singular, plural = past.split("/")
                return plural if number == "plural" or person == 2 else singular
            return past
        if lower.endswith("e"):
            return lower + "d"
        if _CONSONANT_Y_END.search(lower):
            return lower[:-1] + "ied"
        if _VOWEL_CONSONANT_END.search(lower) and len(lower) <= 4:
            return lower + lower[-1] + "ed"
        return lower + "ed"

    if tense == Tense.PERFECT:
        if irregular:
            return irregular[1]
        return conjugate_verb(infinitive, Tense.PAST)

    if tense == Tense.PROGRESSIVE:
        if lower.endswith("ie"):
            return lower[:-2] + "ying"
        if lower.endswith("e") and not lower.endswith("ee") and lower != "be":
            return lower[:-1] + "ing"
        if _VOWEL_CONSONANT_END.search(lower) and len(lower) <= 4:
            return lower + lower[-1] + "ing"
        return lower + "ing"

    if person == 3 and number == "singular":
        special = {"be": "is", "have": "has", "do": "does", "go": "goes"}
        if lower in special:
            return special[lower]
        if _CONSONANT_Y_END.search(lower):
            return lower[:-1] + "ies"
        if lower.endswith(("s", "x", "z", "ch", "sh", "o")):
            return lower + "es"
        return lower + "s"

    if lower == "be":
        if person == 1 and number == "singular":
            return "am"
        return "are"
    return lower


def detect_pos(word: str, previous: Optional[str] = None, next_word: Optional[str] = None) -> PartOfSpeech:
    """
    Guess the part of speech of an English word.

    Closed classes are checked first, then suffixes, then the previous
    word. Unknown words default to noun.
    """
    lower = word.lower()

    if lower in DETERMINERS:
        return PartOfSpeech.DETERMINER
    if lower in PRONOUNS:
        return PartOfSpeech.PRONOUN
    if lower in PREPOSITIONS:
        return PartOfSpeech.PREPOSITION
    if lower in CONJUNCTIONS:
        return PartOfSpeech.CONJUNCTION
    if lower in COMMON_VERBS:
        return PartOfSpeech.VERB

    for suffixes, pos in (
        (ADV_SUFFIXES, PartOfSpeech.ADVERB),
        (ADJ_SUFFIXES, PartOfSpeech.ADJECTIVE),
        (VERB_SUFFIXES, PartOfSpeech.VERB),
        (NOUN_SUFFIXES, PartOfSpeech.NOUN),
    ):
        for suffix in suffixes:
            if lower.endswith(suffix) and len(lower) > len(suffix) + 2:
                return pos

    if lower.endswith(("ing", "ed")):
        return PartOfSpeech.VERB

    if previous:
        prev = previous.lower()
        if prev in DETERMINERS:
            return PartOfSpeech.NOUN
        if prev in ("very", "so", "too"):
            return PartOfSpeech.ADJECTIVE
        if prev == "to":
            return PartOfSpeech.VERB

    return PartOfSpeech.NOUN


def extract_features(word: str, pos: PartOfSpeech) -> MorphologicalFeatures:
    lower = word.lower()
    features = MorphologicalFeatures()

    if pos == PartOfSpeech.NOUN:
        features.is_plural = singularize(lower) != lower
        features.number = "plural" if features.is_plural else "singular"

    if pos == PartOfSpeech.VERB:
        lemma = get_lemma(lower, PartOfSpeech.VERB)
        irregular = IRREGULAR_VERBS.get(lemma)
        if lower.endswith("ing"):
            features.tense = Tense.PROGRESSIVE
        elif lower.endswith("ed") or (irregular and lower in irregular[0].split("/")):
            features.tense = Tense.PAST
        elif irregular and lower == irregular[1] and lower != lemma:
            features.tense = Tense.PERFECT
        else:
            features.tense = Tense.PRESENT

    return features


def apply_morphology(word: str, features: MorphologicalFeatures, target_language: str) -> str:
    """
    Re-inflect a word for the target language.

    Only English targets are inflected; other languages keep the
    dictionary form.
    """
    if target_language != "english":
        return word
    if features.is_plural:
        return pluralize(word)
    return word
