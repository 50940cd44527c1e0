# backend/catalog.py
#
# Static product data, kept in sync with the Stripe dashboard by hand.

from types import MappingProxyType

DESCRIPTION_LIMIT = 200

# Product ID -> Stripe Price ID
PRODUCT_TO_PRICE = MappingProxyType({
    "prod_THxs9v5Opt7nLE": "price_1SZf53JzbynpJBQqWdug6P97",  # Sunrise
    "prod_THxuZf4QLqQZjx": "price_1SLNylJzbynpJBQqPL5pPWK8",  # Time For Everything
    "prod_THxtUYehCZREGs": "price_1SLNy5JzbynpJBQqiLd3QalZ",  # The Entity
    "prod_THxt1F5RED4cA0": "price_1SLNxbJzbynpJBQqMRoBOH3T",  # The Beginning of the End
    "prod_THxsLAj73IHzkE": "price_1SLNwZJzbynpJBQqjstSupa2",  # Stop Act Natural
    "prod_THxrYIKdiioCj0": "price_1SLNvyJzbynpJBQqC8Gvk16d",  # Reflections Of Another Time
    "prod_THxro1C7XRM9az": "price_1SLNvOJzbynpJBQqh8dCHeA7",  # Pearse Station
    "prod_THxqRtGSS6Vmpe": "price_1SLNuwJzbynpJBQqFoyipIAg",  # Past The Fairy Tree
    "prod_THxqmYzRyyk3nj": "price_1SLNuQJzbynpJBQqgEElijwB",  # Infinite Possibilities
    "prod_THxpTmKXkUy4hv": "price_1SLNtjJzbynpJBQqk0V7yY6t",  # Dream Junction
    "prod_THxmI6LnBR3JaD": "price_1SLNrHJzbynpJBQqL5kAnOSb",  # Away with the Faries
    "prod_THxmm6GeFBK9cj": "price_1SLNqUJzbynpJBQq1mQXF8F3",  # A Place To Escape To
    "prod_THiit7KwAsGYoi": "price_1SL9HWJzbynpJBQq2zeTXRWj",  # Big Rock Candy Mountain
    "prod_THihQygkuRpT4G": "price_1SL9G3JzbynpJBQqbgg2V6sx",  # Garden of Kevinity
    "prod_THigAUxOVR7lIH": "price_1SL9F2JzbynpJBQqit6MxmXe",  # If Only I Was a Giant Dinosaur
    "prod_THieNC4E5rjJ2I": "price_1SL9DJJzbynpJBQqDRvk32na",  # Club Mc Meowly's
    "prod_THhx0dGKpMBzjA": "price_1SL8XwJzbynpJBQqZ8nX6WcD",  # Mc Meowly's Lounge
    "prod_THhw4MKoZ3jkk9": "price_1SZvQiJzbynpJBQqc6fCn44y",  # Oh Dorothy (EUR 1 test price)
    "prod_THDi4qLDA9Ty2E": "price_1SKfH6JzbynpJBQq34qDcpcy",  # Big Rock Candy Mountain A4
})

FALLBACK_PRODUCT = MappingProxyType({ "name": "Print", "price": "30.00", "description": "" })


def truncate_description(text, limit=DESCRIPTION_LIMIT):
    if not text:
        return ""
    return text[:limit - 3] + "..." if len(text) > limit else text


def price_id_for(product_id):
    return PRODUCT_TO_PRICE.get(product_id)


_RAW_PRODUCTS = {
    "prod_THxuZf4QLqQZjx": ("Time For Everything", "70.00", "Time For Everything A4"),
    "prod_THxtUYehCZREGs": ("The Entity", "70.00", "The Entity A4"),
    "prod_THxt1F5RED4cA0": ("The Beginning of the End", "70.00", "The Beginning of the End A4"),
    "prod_THxs9v5Opt7nLE": (
        "Sunrise", "30.00",
        "This is my amateur attempt of Cubism I made with scraps of paper & paint.Reflections of "
        "trees on water in the pinkish orange glow of the first light surrounded by the retreating "
        "blue and purple tones of the previous night.Theres something about those magical moments "
        "of 'Sunrise that can only be experienced in person but This piece reminds us of that feeling.",
    ),
    "prod_THxsLAj73IHzkE": ("Stop Act Natural", "70.00", "Stop Act Natural A4"),
    "prod_THxrYIKdiioCj0": ("Reflections Of Another Time", "70.00", "Reflections Of Another Time A4"),
    "prod_THxro1C7XRM9az": ("Pearse Station", "70.00", "Pearse Station A4"),
    "prod_THxqRtGSS6Vmpe": ("Past The Fairy Tree", "70.00", "Past The Fairy Tree A4"),
    "prod_THxqmYzRyyk3nj": (
        "Infinite Possibilities", "70.00",
        "We're all on spaceship Earth with everything we need to grow and live in harmony, yet we "
        "don't. We could live in tandem with nature, but the status quo resists change. Those hit "
        "hardest are in the global south, far from societies that profit from engineered scarcity. "
        "We celebrate short-term gain while ignoring long-term harm. We have infinite possibilities "
        "ahead of us, yet we're drowning in the waste of our own greed.",
    ),
    "prod_THxpTmKXkUy4hv": ("Dream Junction", "70.00", "Dream Junction"),
    "prod_THxmI6LnBR3JaD": ("Away with the Faries", "70.00", "Away with the Faries"),
    "prod_THxmm6GeFBK9cj": ("A Place To Escape To", "70.00", "A Place To Escape To A4"),
    "prod_THiit7KwAsGYoi": (
        "Big Rock Candy Mountain", "70.00",
        "Inspired by Vinicunca Mountain in Peru & an exaggerated take on Irish country vistas and "
        "architecture Big Rock Candy Mountain is a painting & collage that started with the playful "
        "water sky.It's an eye-catching and cheerful colourful piece that comes with the song "
        "playing in your head.Fine Art Print,Including Shipping A4",
    ),
    "prod_THihQygkuRpT4G": (
        "Garden of Kevinity", "90.00",
        "I wanted to gift my dear little brother Kevin with a picture with everything in it.For "
        "Kevin to enjoy finding new things the longer he looked.This came from the bottom of my "
        "heart and was the very first piece I made, the piece that gave me the itch to continue "
        "and fall into this wonderful new addiction.Love you Kev. XFine Art Print,Including Shipping A3 ",
    ),
    "prod_THigAUxOVR7lIH": (
        "If Only I Was a Giant Dinosaur", "70.00",
        "This playful piece just vibes with old monster movies using the New Yorks skyline circa "
        "1940's. It truly begs the question 'If Only I was a Giant Dinosaur ?Id crunch them all I "
        "tell's ya, AYEE IM Walking Here.Fine Art Print,Including Shipping A4 ",
    ),
    "prod_THieNC4E5rjJ2I": (
        "Club Mc Meowly's", "90.00",
        "Think George Micheal singing 'Club Mc Meowly's drinks are free-ee…This shows just how "
        "cool cats hang out and party like it twas 19 dickity 80's.There's lots of characterful "
        "cats to discover, my favourite is the pretty 'cat secrets cat in the top right and then "
        "maybe the Kung-Fu fighting cats in the Cateroke bar.Those cats were fast as lightning."
        "Fine Art Print,Including Shipping A3 ",
    ),
    "prod_THhx0dGKpMBzjA": (
        "Mc Meowly's Lounge", "90.00",
        "The rustic and majestic lounge for Irish cats to lounge around singing and meowing "
        "together.I tried to capture the old Irish pub/shop/town living room that rural and "
        "townsfolk would have been all too familiar with.There's 31, no wait 36 cats in this "
        "piece, maybe….I think.You'll have to count them yourself.Fine Art Print,Including Shipping A3",
    ),
    "prod_THhw4MKoZ3jkk9": (
        "Oh Dorothy", "1.00",
        "Oh Dorothy was especially made for my brave and true Mammy. She complained I hadn't given "
        "her enough art so during hard times I tried my best to makesomething pretty for her.In "
        "Dorothys basket we can see Mam's puppy Frida on their way to the Emerald city (seen in the "
        "distance).Dorothy is struggling to follow a monk like woman  through the colourful "
        "landscape.Lots of sweet things to pick out here.[Gold Frame not included]Fine Art Print,"
        "Including Shipping A4",
    ),
    "prod_THDi4qLDA9Ty2E": ("Big Rock Candy Mountain A4", "70.00", "Big Rock Candy MountainPO 04 Collage 2 2 "),
}

# Product ID -> what the cart copies at add time
PRODUCTS = MappingProxyType({
    product_id: MappingProxyType({
        "name": name,
        "price": price,
        "description": truncate_description(description),
    })
    for product_id, (name, price, description) in _RAW_PRODUCTS.items()
})
