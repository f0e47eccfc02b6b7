# app/data/catalog.py
"""
Wbudowany katalog - uzywany gdy baza jest pusta albo niedostepna,
oraz jako seed (app/data/seed.py).
"""
from decimal import Decimal

BUILTIN_PRODUCTS = [
    {
        "id": "1",
        "name": "Handcrafted Ceramic Mug",
        "price": Decimal("28.00"),
        "original_price": Decimal("35.00"),
        "image": "/assets/product-mug.jpg",
        "rating": Decimal("4.8"),
        "reviews": 42,
        "category": "Ceramics",
        "in_stock": True,
    },
    {
        "id": "2",
        "name": "Woven Storage Basket",
        "price": Decimal("45.00"),
        "original_price": None,
        "image": "/assets/product-basket.jpg",
        "rating": Decimal("4.6"),
        "reviews": 28,
        "category": "Home Decor",
        "in_stock": True,
    },
    {
        "id": "3",
        "name": "Live Edge Cutting Board",
        "price": Decimal("68.00"),
        "original_price": Decimal("85.00"),
        "image": "/assets/product-cutting-board.jpg",
        "rating": Decimal("4.9"),
        "reviews": 67,
        "category": "Kitchen",
        "in_stock": True,
    },
    {
        "id": "4",
        "name": "Artisan Ceramic Bowl Set",
        "price": Decimal("95.00"),
        "original_price": None,
        "image": "/assets/product-mug.jpg",
        "rating": Decimal("4.7"),
        "reviews": 35,
        "category": "Ceramics",
        "in_stock": False,
    },
    {
        "id": "5",
        "name": "Handwoven Placemat Set",
        "price": Decimal("32.00"),
        "original_price": None,
        "image": "/assets/product-basket.jpg",
        "rating": Decimal("4.5"),
        "reviews": 23,
        "category": "Home Decor",
        "in_stock": True,
    },
    {
        "id": "6",
        "name": "Rustic Serving Tray",
        "price": Decimal("55.00"),
        "original_price": None,
        "image": "/assets/product-cutting-board.jpg",
        "rating": Decimal("4.8"),
        "reviews": 51,
        "category": "Kitchen",
        "in_stock": True,
    },
]

BUILTIN_REVIEWS = {
    "1": [
        {
            "id": "1",
            "name": "Sarah M.",
            "rating": 5,
            "comment": "Absolutely love this mug! The quality is excellent and it feels great in my hands. "
                       "Perfect for my morning coffee routine.",
            "date": "2024-01-15",
        },
        {
            "id": "2",
            "name": "John D.",
            "rating": 4,
            "comment": "Great mug, very well made. The only reason I'm not giving 5 stars is because "
                       "it's a bit smaller than I expected.",
            "date": "2024-01-10",
        },
    ],
    "2": [
        {
            "id": "3",
            "name": "Lisa K.",
            "rating": 5,
            "comment": "Beautiful basket! Perfect for organizing my living room and looks great as decor too.",
            "date": "2024-01-12",
        },
    ],
    "3": [
        {
            "id": "4",
            "name": "Mike R.",
            "rating": 5,
            "comment": "Outstanding cutting board. The live edge design is gorgeous and it's very functional. "
                       "Worth every penny!",
            "date": "2024-01-08",
        },
    ],
}

# szczegoly produktu wg kategorii (opis, cechy, specyfikacja)
CATEGORY_DETAILS = {
    "Ceramics": {
        "description": "Handcrafted ceramic piece, perfect for your morning coffee or evening tea. "
                       "Each piece is unique, featuring subtle variations that make it truly one-of-a-kind.",
        "features": [
            "100% handcrafted ceramic",
            "Microwave and dishwasher safe",
            "12 oz capacity",
            "Comfortable ergonomic handle",
            "Lead-free glaze",
        ],
        "specifications": {
            "Material": "High-quality ceramic",
            "Capacity": "12 oz (355ml)",
            "Dimensions": "4.5\" H x 3.5\" W",
            "Weight": "0.8 lbs",
            "Care": "Dishwasher and microwave safe",
        },
    },
    "Home Decor": {
        "description": "Beautifully handwoven piece perfect for organizing your home. Made from sustainable "
                       "materials with excellent craftsmanship.",
        "features": [
            "Handwoven natural materials",
            "Sustainable and eco-friendly",
            "Sturdy construction",
            "Versatile storage solution",
            "Beautiful decorative accent",
        ],
        "specifications": {
            "Material": "Natural woven fibers",
            "Dimensions": "16\" L x 12\" W x 10\" H",
            "Weight": "2.5 lbs",
            "Care": "Spot clean only",
        },
    },
    "Kitchen": {
        "description": "Premium piece crafted from sustainably sourced hardwood. Features natural wood grain "
                       "patterns and smooth finish. Perfect for food preparation and serving.",
        "features": [
            "Live edge design",
            "Food-safe finish",
            "Sustainably sourced hardwood",
            "Natural wood grain patterns",
            "Dual-purpose: cutting and serving",
        ],
        "specifications": {
            "Material": "Hardwood (Walnut/Maple)",
            "Dimensions": "18\" L x 12\" W x 1.5\" H",
            "Weight": "4.2 lbs",
            "Care": "Hand wash only, oil monthly",
        },
    },
}

DEFAULT_DETAILS = {
    "description": "",
    "features": [],
    "specifications": {},
}


def builtin_product(product_id: str) -> dict | None:
    for p in BUILTIN_PRODUCTS:
        if p["id"] == product_id:
            return p
    return None


def details_for_category(category: str) -> dict:
    return CATEGORY_DETAILS.get(category, DEFAULT_DETAILS)
