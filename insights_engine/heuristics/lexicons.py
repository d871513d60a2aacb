"""
Static bilingual (English / Indonesian) marker tables used by the heuristic
classification path.

All tables are immutable. Matching is lowercase substring containment, so
entries are stored lowercase.
"""

from typing import Dict, FrozenSet, Tuple


# --- Sentiment hints -------------------------------------------------------

POSITIVE_HINT_WORDS: FrozenSet[str] = frozenset({"positive", "positif", "good", "bagus"})
POSITIVE_HINT_CODES: FrozenSet[str] = frozenset({"1", "pos"})
NEGATIVE_HINT_WORDS: FrozenSet[str] = frozenset({"negative", "negatif", "bad", "buruk"})
NEGATIVE_HINT_CODES: FrozenSet[str] = frozenset({"-1", "0", "neg"})
NEUTRAL_HINT_WORDS: FrozenSet[str] = frozenset({"neutral", "netral"})
NEUTRAL_HINT_CODES: FrozenSet[str] = frozenset({"2", "neu"})

LOW_SATISFACTION: FrozenSet[str] = frozenset({
    "1", "2", "low", "tidak puas", "unsatisfied", "poor",
})
HIGH_SATISFACTION: FrozenSet[str] = frozenset({
    "4", "5", "high", "puas", "satisfied", "good",
})
TRIVIAL_ISSUE_HINTS: FrozenSet[str] = frozenset({"none", "no"})


# --- Negative markers ------------------------------------------------------

STRONG_NEGATIVE: FrozenSet[str] = frozenset({
    "terrible", "awful", "horrible", "worst", "hate", "broken", "defective", "useless", "garbage", "scam",
    "disgusting", "pathetic", "nightmare", "disaster", "catastrophe", "appalling", "atrocious", "revolting",
    "abysmal", "dreadful", "deplorable", "horrendous", "hideous", "repulsive", "vile", "wretched",
    "abominable", "detestable", "loathsome", "odious", "contemptible", "despicable", "heinous",
    "mengerikan", "sangat buruk", "parah", "jelek banget", "kacau", "hancur", "rusak total",
    "menjijikkan", "menyebalkan", "sangat mengecewakan", "benar-benar buruk", "parah banget",
    "ngaco banget", "zonk", "bohong", "tipu-tipu", "penipu", "sampah banget", "fatal",
})

NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    "bad", "poor", "disappointed", "problem", "issue", "wrong", "fail", "error", "slow", "expensive",
    "disappointing", "unsatisfied", "unhappy", "frustrated", "annoyed", "upset", "angry", "mad",
    "waste", "regret", "sorry", "complaint", "complain", "negative", "lacking", "missing", "absent",
    "buruk", "jelek", "kecewa", "masalah", "salah", "gagal", "lambat", "mahal", "tidak puas",
    "kesal", "jengkel", "menyesal", "keluhan", "komplain", "kurang", "tidak ada", "hilang",
    "worse", "worst", "sucks", "hate", "dislike", "avoid", "never", "nobody", "nothing", "nowhere",
    "difficult", "hard", "tough", "struggle", "trouble", "concern", "worry", "fear", "doubt",
    "uncomfortable", "inconvenient", "unacceptable", "inappropriate", "incorrect", "inadequate",
    "insufficient", "incomplete", "imperfect", "inferior", "unpleasant", "unreliable", "unstable",
    "unsure", "uncertain", "unclear", "confusing", "complicated", "complex", "messy", "dirty",
    "old", "outdated", "obsolete", "weak", "fragile", "brittle", "cracked", "broken", "torn",
    "lebih buruk", "terburuk", "benci", "tidak suka", "hindari", "tidak pernah", "sulit",
    "susah", "repot", "ribet", "merepotkan", "mengganggu", "khawatir", "ragu", "tidak nyaman",
    "tidak cocok", "tidak tepat", "tidak sesuai", "tidak lengkap", "tidak sempurna", "lemah",
    "rapuh", "retak", "sobek", "kotor", "lama", "jadul", "kuno", "bingung",
    "not good", "not great", "not satisfied", "could be better", "needs improvement", "below expectation",
    "tidak bagus", "tidak baik", "kurang memuaskan", "bisa lebih baik", "perlu diperbaiki", "di bawah harapan",
})

FUNCTIONAL_DEFECT: FrozenSet[str] = frozenset({
    "not working", "not function", "broken", "defect", "malfunction", "crashed", "freeze", "stuck",
    "won't start", "doesn't work", "stopped working", "died", "faulty", "damaged", "corrupt",
    "tidak berfungsi", "tidak bekerja", "rusak", "bermasalah", "error", "gagal", "mati", "hang",
    "tidak bisa", "tidak mau", "berhenti", "cacat", "rusak parah", "tidak hidup", "macet",
})

QUALITY_ISSUE: FrozenSet[str] = frozenset({
    "poor quality", "cheap", "flimsy", "fragile", "weak", "thin", "low quality", "substandard",
    "inferior", "shoddy", "unreliable", "unstable", "inconsistent", "disappointing quality",
    "kualitas buruk", "murahan", "rapuh", "lemah", "tipis", "tidak berkualitas", "abal-abal",
    "kualitas jelek", "tidak tahan lama", "mudah rusak", "tidak awet", "cepat rusak",
})

SERVICE_ISSUE: FrozenSet[str] = frozenset({
    "poor service", "rude", "unhelpful", "unprofessional", "slow service", "bad service",
    "terrible service", "worst service", "no response", "ignored", "dismissed", "arrogant",
    "layanan buruk", "tidak membantu", "kasar", "tidak profesional", "pelayanan jelek",
    "tidak sopan", "cuek", "diabaikan", "tidak peduli", "sombong", "lambat respon",
})

DELIVERY_ISSUE: FrozenSet[str] = frozenset({
    "late delivery", "delayed", "never arrived", "lost package", "damaged package", "wrong item",
    "missing items", "incomplete order", "shipping problem", "delivery problem", "not delivered",
    "terlambat", "tidak sampai", "hilang", "rusak", "salah barang", "kurang barang",
    "pengiriman bermasalah", "tidak dikirim", "telat kirim", "paket hilang", "barang kurang",
})

PERFORMANCE_ISSUE: FrozenSet[str] = frozenset({
    "slow", "laggy", "sluggish", "unresponsive", "timeout", "crash", "bug", "glitch",
    "overheating", "battery drain", "memory leak", "performance issue", "speed problem",
    "lambat", "lemot", "ngelag", "hang", "panas", "boros baterai", "error sistem",
})

NEGATION_PATTERNS: FrozenSet[str] = frozenset({
    "not good", "not great", "not satisfied", "not happy", "not recommended", "not worth",
    "no good", "never again", "wouldn't recommend", "avoid this", "stay away", "don't buy",
    "tidak bagus", "tidak baik", "tidak puas", "tidak senang", "tidak rekomen", "tidak worth",
    "jangan beli", "hindari", "tidak recommend", "tidak cocok", "tidak sesuai",
})


# --- Positive markers ------------------------------------------------------

STRONG_POSITIVE: FrozenSet[str] = frozenset({
    "amazing", "awesome", "excellent", "outstanding", "superb", "fantastic", "wonderful", "brilliant",
    "incredible", "magnificent", "spectacular", "phenomenal", "exceptional", "remarkable", "marvelous",
    "fabulous", "terrific", "gorgeous", "stunning", "breathtaking", "mind-blowing", "world-class",
    "top-notch", "first-class", "premium", "luxury", "perfect", "flawless", "impeccable", "divine",
    "luar biasa", "hebat banget", "keren abis", "mantap jiwa", "top banget", "juara", "terbaik",
    "sempurna", "istimewa", "menakjubkan", "fantastis", "spektakuler", "dahsyat", "mengagumkan",
    "sangat memuaskan", "benar-benar bagus", "kualitas premium", "worth it banget", "recommended banget",
})

POSITIVE_WORDS: FrozenSet[str] = frozenset({
    "good", "great", "nice", "fine", "okay", "pleasant", "enjoyable", "satisfying", "decent", "solid",
    "bagus", "baik", "oke", "lumayan", "cukup", "tidak buruk", "menyenangkan", "memuaskan",
    "quality", "fresh", "delicious", "tasty", "flavorful", "crispy", "smooth", "soft", "tender",
    "berkualitas", "segar", "enak", "lezat", "gurih", "renyah", "halus", "lembut", "empuk",
    "satisfied", "happy", "pleased", "content", "glad", "comfortable", "convenient", "easy",
    "puas", "senang", "suka", "gembira", "nyaman", "mudah", "praktis", "lancar",
    "worth it", "affordable", "reasonable", "fair price", "good value", "cheap", "economical",
    "worth", "sebanding", "murah", "terjangkau", "pas", "hemat", "ekonomis", "sesuai harga",
    "recommend", "suggest", "advise", "endorse", "approve", "support", "back", "vouch",
    "rekomendasikan", "sarankan", "anjurkan", "dukung", "setuju", "referensikan",
})
POSITIVE_WORD_POINTS = 2
POSITIVE_WORD_CAP = 8

POSITIVE_EXPERIENCE: FrozenSet[str] = frozenset({
    "love it", "love this", "really like", "quite good", "pretty good", "fairly good", "rather good",
    "suka banget", "cinta ini", "doyan banget", "ketagihan", "nagih", "bikin ketagihan",
})

LOYALTY: FrozenSet[str] = frozenset({
    "will buy again", "buying again", "repeat purchase", "loyal customer", "regular customer",
    "beli lagi", "langganan", "pelanggan setia", "repeat order", "order lagi",
})

GRATITUDE: FrozenSet[str] = frozenset({
    "thank you", "thanks", "grateful", "appreciate", "terima kasih", "makasih", "thx",
    "god bless", "bless you", "blessed", "syukur", "alhamdulillah", "berterima kasih",
})

RECOMMEND_NEGATORS: Tuple[str, ...] = ("not recommend", "wouldn't recommend")


# --- Contextual cues: (markers, points) ------------------------------------

NEGATIVE_CUES: Tuple[Tuple[FrozenSet[str], int], ...] = (
    (frozenset({"refund", "return", "money back", "tukar balik"}), 2),
    (frozenset({"never again", "last time", "tidak lagi"}), 3),
    (frozenset({"warning", "beware", "careful", "hati-hati"}), 2),
    (frozenset({"disappointed", "kecewa", "frustasi"}), 2),
    (frozenset({"cancel", "batal", "stop", "quit"}), 2),
    (frozenset({"fix", "repair", "replace", "perbaiki"}), 1),
    (frozenset({"!!!", "???"}), 1),
    (frozenset({"hate", "disgusting", "awful", "benci"}), 4),
    (frozenset({"never again", "worst", "terrible", "tidak lagi"}), 4),
    (frozenset({"disappointed", "frustrated", "kecewa", "kesal"}), 2),
    (frozenset({"waste of money", "buang-buang uang", "not worth"}), 3),
    (frozenset({"poor quality", "kualitas buruk", "cheap quality"}), 3),
)

POSITIVE_CUES: Tuple[Tuple[FrozenSet[str], int], ...] = (
    (frozenset({"five star", "5 star", "bintang 5"}), 3),
    (frozenset({"best", "terbaik", "nomor satu"}), 2),
    (frozenset({"satisfied", "puas", "happy", "senang"}), 2),
    (frozenset({"impressed", "terkesan", "kagum"}), 2),
    (frozenset({"love", "adore", "cinta", "suka banget"}), 3),
    (frozenset({"amazing", "wow", "incredible", "luar biasa"}), 3),
    (frozenset({"will buy again", "beli lagi", "repeat purchase"}), 3),
    (frozenset({"definitely recommend", "highly recommend", "strongly recommend"}), 3),
)

# Cues that need two markers together
SURPRISE_PAIRS: Tuple[Tuple[str, str], ...] = (("surprised", "good"), ("terkejut", "bagus"))
SURPRISE_POINTS = 2


# --- Topics and key phrases ------------------------------------------------

TOPICS: Dict[str, Tuple[str, ...]] = {
    "taste": ("rasa", "enak", "taste"),
    "quality": ("kualitas", "quality"),
    "price": ("harga", "price", "murah", "mahal"),
    "packaging": ("kemasan", "packaging", "bungkus"),
    "service": ("service", "layanan"),
    "delivery": ("delivery", "pengiriman"),
    "availability": ("tersedia", "availability"),
    "promotion": ("promo", "promotion"),
    "brand": ("brand", "merek"),
}
DEFAULT_TOPIC = "general"

# Ordered (canonical phrase, triggers)
KEY_PHRASES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("rasa enak", ("rasa enak", "enak sekali")),
    ("kualitas bagus", ("kualitas bagus", "kualitas baik")),
    ("harga terjangkau", ("harga terjangkau", "harga murah")),
    ("sangat suka", ("sangat suka", "suka banget")),
    ("tidak suka", ("tidak suka", "kurang suka")),
    ("kemasan bagus", ("kemasan bagus", "packaging bagus")),
    ("sulit ditemukan", ("sulit ditemukan", "susah dicari")),
    ("pelayanan baik", ("pelayanan baik", "service bagus")),
    ("recommended", ("recommended", "direkomendasikan")),
    ("mengecewakan", ("mengecewakan", "disappointing")),
    ("taste good", ("taste good", "delicious")),
    ("good quality", ("good quality", "high quality")),
    ("affordable", ("affordable", "reasonable price")),
    ("love it", ("love it", "really like")),
    ("don't like", ("dont like", "don't like")),
    ("good packaging", ("good packaging", "nice package")),
    ("hard to find", ("hard to find", "not available")),
    ("good service", ("good service", "excellent service")),
    ("highly recommend", ("highly recommend", "must try")),
    ("disappointing", ("disappointing", "not satisfied")),
    ("rasa original", ("rasa original", "original flavor")),
    ("varian baru", ("varian baru", "new variant")),
    ("porsi kecil", ("porsi kecil", "small portion")),
    ("porsi besar", ("porsi besar", "big portion")),
    ("expired", ("expired", "kadaluarsa")),
    ("fresh", ("fresh", "segar")),
    ("akan beli lagi", ("akan beli lagi", "will buy again")),
    ("tidak akan beli", ("tidak akan beli", "wont buy again")),
    ("best seller", ("best seller", "terbaik")),
    ("worst", ("worst", "terburuk")),
)


# --- Issue classification --------------------------------------------------

NEGATIVE_SENTIMENT_HINT_MARKERS: FrozenSet[str] = frozenset({"negative", "negatif", "bad", "buruk"})
DISSATISFIED_MARKERS: FrozenSet[str] = frozenset({"no", "tidak", "dissatisfied", "tidak puas"})
ISSUE_HINT_MARKERS: FrozenSet[str] = frozenset({"yes", "ada", "true"})
ISSUE_HINT_MIN_LENGTH = 5

ISSUE_TRIGGERS: FrozenSet[str] = frozenset({
    "not function", "tidak berfungsi", "broken", "rusak", "malfunction", "error",
    "poor quality", "kualitas buruk", "disappointing", "mengecewakan",
    "poor service", "layanan buruk", "late delivery", "telat kirim",
    "slow", "lambat", "lag", "hang",
})

# Evaluated in order; first match wins
ISSUE_CATEGORIES: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("functional_defects", frozenset({
        "not function", "tidak berfungsi", "broken", "rusak", "malfunction", "stopped working",
        "not working", "dead", "mati", "crash", "hang", "freeze",
    })),
    ("quality_issues", frozenset({
        "poor quality", "kualitas buruk", "cheap quality", "murahan", "disappointing", "mengecewakan",
        "not worth", "waste of money", "regret buying", "menyesal beli", "damaged", "scratched", "dented",
    })),
    ("service_problems", frozenset({
        "poor service", "layanan buruk", "rude staff", "staff kasar", "unhelpful", "tidak membantu",
        "bad customer service", "wrong item", "barang salah", "missing parts", "kurang parts", "incomplete",
    })),
    ("delivery_issues", frozenset({
        "late delivery", "telat kirim", "delayed", "terlambat", "damaged packaging", "kemasan rusak",
        "never arrived", "tidak sampai", "lost package", "paket hilang",
    })),
    ("performance_problems", frozenset({
        "slow", "lambat", "lag", "laggy", "overheating", "panas berlebihan", "battery drain",
        "baterai cepat habis", "poor performance", "performa buruk",
    })),
    ("design_flaws", frozenset({
        "bad design", "design buruk", "uncomfortable", "tidak nyaman", "hard to use", "sulit digunakan",
        "confusing", "membingungkan", "ugly", "jelek", "awkward", "aneh",
    })),
)
DEFAULT_ISSUE_CATEGORY = "quality_issues"

# Primary-path issueType values
AI_ISSUE_TYPES: Dict[str, str] = {
    "functional": "functional_defects",
    "quality": "quality_issues",
    "service": "service_problems",
    "delivery": "delivery_issues",
    "performance": "performance_problems",
    "design": "design_flaws",
}


# --- Regions and products --------------------------------------------------

KNOWN_CITIES: Tuple[str, ...] = (
    "jakarta", "surabaya", "bandung", "medan", "makassar", "yogyakarta", "semarang",
    "palembang", "tangerang", "depok", "bekasi", "bogor", "batam", "pekanbaru",
    "new york", "los angeles", "chicago", "london", "paris", "tokyo", "singapore",
    "kuala lumpur", "bangkok", "manila", "ho chi minh", "mumbai", "delhi", "sydney",
)
REGION_PREPOSITIONS: Tuple[str, ...] = ("from", "in", "at", "di", "dari")
REGION_NOISE_WORDS: Tuple[str, ...] = ("city", "kota", "kabupaten", "regency", "province", "provinsi")
# Capitalized words after a preposition that are dates, not places
REGION_STOP_WORDS: FrozenSet[str] = frozenset({
    "january", "february", "march", "april", "may", "june", "july", "august",
    "september", "october", "november", "december",
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
    "januari", "februari", "maret", "mei", "juni", "juli", "agustus", "oktober", "desember",
    "senin", "selasa", "rabu", "kamis", "jumat", "sabtu", "minggu",
})
PLACEHOLDER_REGIONS: Tuple[str, ...] = ("Jakarta", "Surabaya", "Bandung", "Medan", "Other")

# Evaluated in order; first match wins. Electronics also looks at the text.
PRODUCT_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("electronics", ("smartphone", "phone", "hp", "laptop", "computer", "pc", "tablet", "ipad")),
    ("appliances", ("tv", "television", "ac", "kulkas", "refrigerator", "microwave",
                    "washing machine", "mesin cuci")),
    ("automotive", ("car", "mobil", "motor", "motorcycle", "automotive")),
    ("fashion", ("clothing", "fashion", "shirt", "dress", "shoes", "sepatu", "baju", "pakaian")),
    ("health_beauty", ("health", "beauty", "cosmetic", "skincare", "supplement", "vitamin")),
    ("beverages", ("beverage", "drink", "minuman")),
    ("snacks", ("snack", "makanan ringan", "food")),
    ("dairy", ("dairy", "susu", "milk")),
    ("frozen", ("frozen", "beku")),
    ("personal_care", ("personal", "care")),
)
ELECTRONICS_TEXT_MARKERS: Tuple[str, ...] = ("smartphone", "laptop", "computer")
DEFAULT_PRODUCT_CATEGORY = "other"
EMPTY_PRODUCT_DISTRIBUTION: Tuple[str, ...] = ("beverages", "snacks", "dairy", "frozen", "personal_care")
