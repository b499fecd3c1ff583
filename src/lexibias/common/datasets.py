"""Small bundled corpora and word lists used in the walkthrough and tests."""

__all__ = [
    "TOY_CORPUS",
    "FLOWERS",
    "INSECTS",
    "PLEASANT",
    "UNPLEASANT",
    "MALE_TERMS",
    "FEMALE_TERMS",
]

# Doc1 and Doc2 share four of their six terms: binary cosine is 4/6
TOY_CORPUS = (
    "Cats chase mice around old barns.",
    "Cats chase mice around new houses.",
    "Dogs chase cats around the garden.",
    "The old farmer feeds the cats and the dogs.",
    "Mice hide in old barns during winter.",
    "New houses replace old barns near the village.",
    "The village garden grows roses and tulips.",
    "Farmers and villagers share the garden in summer.",
    "Dogs sleep in the barns during winter nights.",
    "Summer nights in the village are warm and quiet.",
)

# Caliskan, Bryson & Narayanan (2017), WEAT 1
FLOWERS = (
    "aster", "clover", "hyacinth", "marigold", "poppy",
    "azalea", "crocus", "iris", "orchid", "rose",
)

INSECTS = (
    "ant", "caterpillar", "flea", "locust", "spider",
    "bedbug", "centipede", "fly", "maggot", "tarantula",
)

PLEASANT = (
    "caress", "freedom", "health", "love", "peace",
    "cheer", "friend", "heaven", "loyal", "pleasure",
)

UNPLEASANT = (
    "abuse", "crash", "filth", "murder", "sickness",
    "accident", "death", "grief", "poison", "stink",
)

MALE_TERMS = ("male", "man", "boy", "brother", "he", "him", "his", "son")

FEMALE_TERMS = ("female", "woman", "girl", "sister", "she", "her", "hers", "daughter")
