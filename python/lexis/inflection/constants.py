"""
Seed rule tables for the English inflector.

Every RuleSet starts from a copy of these tables. Pattern rules are
(pattern, template) pairs compiled case-insensitively and tried in order;
the first pattern that matches is the one applied, so specific rules come
before general ones and the catch-all rules sit at the very end.
"""

# Words counted by the application (hits, clicks, ...)
COUNTABLE_WORDS = (
    "id",
    "hits",
    "clicks",
)

# Suffix families that never change. The uninflected tables are exact-match,
# so these live at the head of the pattern lists as identity rules.
_INVARIANT_SUFFIXES = r"[nrlm]ese|deer|fish|measles|ois|pox|sheep|media"

PLURAL_RULES = [
    (rf"({_INVARIANT_SUFFIXES})$", r"\1"),
    (r"(s)tatus$", r"\1tatuses"),
    (r"(quiz)$", r"\1zes"),
    (r"^(ox)$", r"\1en"),
    (r"([ml])ouse$", r"\1ice"),
    (r"(matr|vert|ind)(ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive|gulf)$", r"\1s"),
    # knife -> knives, wolf -> wolves
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", r"ses"),
    (r"([ti])um$", r"\1a"),
    (r"(p)erson$", r"\1eople"),
    (r"(m)an$", r"\1en"),
    (r"(c)hild$", r"\1hildren"),
    (r"(f)oot$", r"\1eet"),
    (r"(buffal|her|potat|tomat|volcan)o$", r"\1oes"),
    (r"(alumn|bacill|cact|foc|fung|nucle|radi|stimul|syllab|termin|vir)us$", r"\1i"),
    (r"us$", r"uses"),
    (r"(alias)$", r"\1es"),
    (r"(analys|ax|cris|test|thes)is$", r"\1es"),
    # Already plural
    (r"s$", r"s"),
    (r"^$", r""),
    (r"$", r"s"),
]

SINGULAR_RULES = [
    (rf"({_INVARIANT_SUFFIXES}|ss)$", r"\1"),
    (r"(s)tatuses$", r"\1tatus"),
    (r"^(.*)(menu)s$", r"\1\2"),
    (r"(quiz)zes$", r"\1"),
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"^(ox)en$", r"\1"),
    (r"(alias)(es)*$", r"\1"),
    (r"(buffal|her|potat|tomat|volcan)oes$", r"\1o"),
    (r"(alumn|bacill|cact|foc|fung|nucle|radi|stimul|syllab|termin|viri?)i$", r"\1us"),
    (r"([ftw]ax)es$", r"\1"),
    (r"(analys|ax|cris|test|thes)es$", r"\1is"),
    (r"(shoe|slave)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"ouses$", r"ouse"),
    (r"([^a])uses$", r"\1us"),
    (r"([ml])ice$", r"\1ouse"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(s)eries$", r"\1eries"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"([lr])ves$", r"\1f"),
    (r"(tive)s$", r"\1"),
    (r"(hive)s$", r"\1"),
    (r"(drive)s$", r"\1"),
    (r"(dive)s$", r"\1"),
    (r"(olive)s$", r"\1"),
    (r"([^fo])ves$", r"\1fe"),
    (r"(^analy)ses$", r"\1sis"),
    (r"(analy|diagno|^ba|parenthe|progno|synop|the)ses$", r"\1sis"),
    (r"([ti])a$", r"\1um"),
    (r"(p)eople$", r"\1erson"),
    (r"(m)en$", r"\1an"),
    (r"(c)hildren$", r"\1hild"),
    (r"(f)eet$", r"\1oot"),
    (r"(n)ews$", r"\1ews"),
    (r"eaus$", r"eau"),
    # Already singular
    (r"^(.*us)$", r"\1"),
    (r"s$", r""),
]

# Identical in both directions
UNINFLECTED_WORDS = (
    "Amoyese", "bison", "Borghese", "bream", "breeches", "britches",
    "buffalo", "cantus", "carp", "chassis", "clippers", "cod", "coitus",
    "Congoese", "contretemps", "corps", "debris", "diabetes", "djinn",
    "eland", "elk", "equipment", "Faroese", "flounder", "Foochowese",
    "gallows", "Genevese", "Genoese", "Gilbertese", "headquarters",
    "herpes", "hijinks", "Hottentotese", "information", "innings",
    "jackanapes", "Kiplingese", "Kongoese", "Lucchese", "mackerel",
    "Maltese", "metadata", "mews", "moose", "mumps", "Nankingese", "news",
    "nexus", "Niasese", "Pekingese", "Piedmontese", "pincers", "Pistoiese",
    "pliers", "Portuguese", "proceedings", "rabies", "rice", "rhinoceros",
    "salmon", "Sarawakese", "scissors", "sea bass", "sea-bass", "series",
    "Shavese", "shears", "siemens", "species", "staff", "swine",
    "trousers", "trout", "tuna", "Vermontese", "Wenchowese", "whiting",
    "wildebeest", "Yengeese",
)

PLURAL_UNINFLECTED = ("people", "police")

SINGULAR_UNINFLECTED = ("police", "pants", "clothes")

# singular -> plural
IRREGULAR_WORDS = {
    "atlas": "atlases",
    "axe": "axes",
    "beef": "beefs",
    "brother": "brothers",
    "cafe": "cafes",
    "chateau": "chateaux",
    "child": "children",
    "cookie": "cookies",
    "corpus": "corpuses",
    "cow": "cows",
    "criterion": "criteria",
    "curriculum": "curricula",
    "demo": "demos",
    "domino": "dominoes",
    "echo": "echoes",
    "foe": "foes",
    "foot": "feet",
    "fungus": "fungi",
    "ganglion": "ganglions",
    "genie": "genies",
    "genus": "genera",
    "goose": "geese",
    "graffito": "graffiti",
    "hippopotamus": "hippopotami",
    "hoof": "hoofs",
    "human": "humans",
    "iris": "irises",
    "larva": "larvae",
    "leaf": "leaves",
    "loaf": "loaves",
    "man": "men",
    "medium": "media",
    "memorandum": "memoranda",
    "money": "monies",
    "mongoose": "mongooses",
    "motto": "mottoes",
    "move": "moves",
    "mythos": "mythoi",
    "niche": "niches",
    "niveau": "niveaux",
    "nucleus": "nuclei",
    "numen": "numina",
    "occiput": "occiputs",
    "octopus": "octopuses",
    "opus": "opuses",
    "ox": "oxen",
    "passerby": "passersby",
    "penis": "penises",
    "person": "people",
    "plateau": "plateaux",
    "runner-up": "runners-up",
    "sex": "sexes",
    "soliloquy": "soliloquies",
    "son-in-law": "sons-in-law",
    "syllabus": "syllabi",
    "testis": "testes",
    "thief": "thieves",
    "tooth": "teeth",
    "tornado": "tornadoes",
    "trilby": "trilbys",
    "turf": "turfs",
    "valve": "valves",
    "wave": "waves",
    "woman": "women",
}

RULE_TYPES = ("singular", "plural", "countable")
