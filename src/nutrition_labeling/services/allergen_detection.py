"""Keyword-based Big 9 allergen detection for food descriptions.

Used to prefill ingredient allergen flags from USDA descriptions and food
categories. Matches are suggestions; the flags stored on an ingredient are
what the label calculation trusts.
"""

import re
from types import MappingProxyType

from nutrition_labeling.domain.allergens import AllergenSummary

ALLERGEN_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "contains_milk": (
            "milk", "dairy", "cream", "butter", "cheese", "yogurt", "yoghurt",
            "whey", "casein", "lactose", "ghee", "custard", "ice cream",
            "buttermilk", "half and half", "sour cream", "cottage cheese",
            "ricotta", "mozzarella", "cheddar", "parmesan", "brie", "camembert",
            "gouda", "swiss cheese", "cream cheese", "condensed milk",
            "evaporated milk", "skim milk", "whole milk", "low-fat milk",
            "nonfat milk", "milkfat",
        ),
        "contains_eggs": (
            "egg", "eggs", "albumin", "albumen", "meringue", "mayonnaise",
            "eggnog", "ovalbumin", "ovomucin", "ovomucoid", "ovovitellin",
            "globulin", "livetin", "lysozyme", "surimi", "yolk", "egg white",
            "egg yolk", "whole egg", "dried egg", "powdered egg",
        ),
        "contains_fish": (
            "fish", "salmon", "tuna", "cod", "tilapia", "halibut", "mahi mahi",
            "anchovy", "anchovies", "sardine", "sardines", "mackerel", "herring",
            "trout", "bass", "catfish", "perch", "pike", "flounder", "sole",
            "swordfish", "pollock", "haddock", "whiting", "snapper", "grouper",
            "fish sauce", "fish oil", "omega-3", "caviar", "roe", "surimi",
        ),
        "contains_shellfish": (
            "shellfish", "shrimp", "prawn", "prawns", "crab", "lobster",
            "crayfish", "crawfish", "langostino", "scallop", "scallops",
            "clam", "clams", "mussel", "mussels", "oyster", "oysters",
            "squid", "calamari", "octopus", "abalone", "snail", "escargot",
            "crustacean", "crustaceans", "mollusc", "mollusk", "krill",
        ),
        "contains_tree_nuts": (
            "almond", "almonds", "cashew", "cashews", "walnut", "walnuts",
            "pecan", "pecans", "pistachio", "pistachios", "macadamia",
            "brazil nut", "brazil nuts", "hazelnut", "hazelnuts", "filbert",
            "chestnut", "chestnuts", "pine nut", "pine nuts", "pignoli",
            "praline", "nougat", "marzipan", "gianduja", "nutella",
            "tree nut", "tree nuts", "nut butter", "almond butter",
            "cashew butter", "almond milk",
            # FDA lists coconut as a tree nut.
            "coconut",
        ),
        "contains_peanuts": (
            "peanut", "peanuts", "groundnut", "groundnuts", "arachis",
            "peanut butter", "peanut oil", "peanut flour", "goober",
            "monkey nut", "earth nut", "beer nut", "beer nuts",
        ),
        "contains_wheat": (
            "wheat", "flour", "bread", "pasta", "noodle", "noodles", "spaghetti",
            "macaroni", "fettuccine", "tortilla", "pita", "bagel", "cracker",
            "crackers", "biscuit", "biscuits", "cake", "cookie", "cookies",
            "muffin", "muffins", "pastry", "croissant", "donut", "doughnut",
            "pie crust", "pizza", "breadcrumb", "breadcrumbs", "panko",
            "couscous", "bulgur", "semolina", "durum", "spelt", "farina",
            "kamut", "einkorn", "emmer", "triticale", "seitan", "gluten",
            "farro", "wheat germ", "wheat bran", "wheat starch",
            "modified food starch",
        ),
        "contains_soybeans": (
            "soy", "soya", "soybean", "soybeans", "edamame", "tofu",
            "tempeh", "miso", "natto", "soy sauce", "shoyu", "tamari",
            "soy milk", "soy protein", "soy flour", "soy lecithin",
            "textured vegetable protein", "tvp", "soy oil", "soybean oil",
            "hydrolyzed soy", "soy isolate", "soy concentrate",
        ),
        "contains_sesame": (
            "sesame", "sesame seed", "sesame seeds", "tahini", "tahina",
            "halvah", "halva", "hummus", "falafel", "sesame oil",
            "benne", "benne seed", "gingelly", "gingelly oil", "til",
            "sesame flour", "sesame paste", "sesamol", "sesamolin",
        ),
    }
)

# USDA food categories that imply allergens regardless of description.
CATEGORY_ALLERGENS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "Dairy and Egg Products": ("contains_milk", "contains_eggs"),
        "Dairy products": ("contains_milk",),
        "Milk": ("contains_milk",),
        "Cheese": ("contains_milk",),
        "Eggs": ("contains_eggs",),
        "Finfish and Shellfish Products": ("contains_fish", "contains_shellfish"),
        "Fish": ("contains_fish",),
        "Shellfish": ("contains_shellfish",),
        "Nut and Seed Products": (
            "contains_tree_nuts",
            "contains_peanuts",
            "contains_sesame",
        ),
        "Nuts": ("contains_tree_nuts",),
        "Seeds": ("contains_sesame",),
        "Legumes and Legume Products": ("contains_peanuts", "contains_soybeans"),
        "Legumes": ("contains_soybeans",),
        "Cereal Grains and Pasta": ("contains_wheat",),
        "Baked Products": ("contains_wheat", "contains_eggs", "contains_milk"),
        "Breads": ("contains_wheat",),
        "Pasta": ("contains_wheat",),
        "Breakfast Cereals": ("contains_wheat",),
    }
)

_KEYWORD_PATTERNS: dict[str, re.Pattern[str]] = {
    field: re.compile(
        r"\b(?:" + "|".join(re.escape(keyword) for keyword in keywords) + r")\b",
        re.IGNORECASE,
    )
    for field, keywords in ALLERGEN_KEYWORDS.items()
}


def detect_allergens(
    description: str,
    food_category: str | None = None,
    brand_name: str | None = None,
) -> AllergenSummary:
    """Detect likely allergens from a food description, brand and category."""
    search_text = f"{description} {brand_name or ''}"
    flags = {
        field: pattern.search(search_text) is not None
        for field, pattern in _KEYWORD_PATTERNS.items()
    }
    if food_category:
        for field in CATEGORY_ALLERGENS.get(food_category, ()):
            flags[field] = True
    return AllergenSummary(**flags)


def present_allergen_labels(summary: AllergenSummary) -> list[str]:
    """Return display labels such as ``"Tree Nuts"`` for present allergens."""
    return [allergen.label for allergen in summary.present()]
