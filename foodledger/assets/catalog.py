"""
Food Ledger Assets — Seed Catalog
====================================
The fixed set of products InitLedger writes under keys "1".."8".
Order matters: position n (1-based) is stored under key str(n).
"""

from __future__ import annotations

from foodledger.assets.product import Actor, Location, Product

APPLE_IMAGE_URL = (
    "https://www.google.com/imgres?imgurl=https%3A%2F%2Fwww.shutterstock.com"
    "%2Fimage-photo%2Fripe-apples-display-sale-on-260nw-1822577225.jpg"
    "&tbnid=_80h5A5M7JA99M&vet=12ahUKEwjklJH-6sf-AhUZ5HMBHcg9CRAQMygLegUIARCAAg..i"
    "&imgrefurl=https%3A%2F%2Fwww.shutterstock.com%2Fsearch%2Fapple-carton"
    "&docid=iGQDBsh5yQqLEM&w=426&h=280&q=apple%20in%20carton"
    "&ved=2ahUKEwjklJH-6sf-AhUZ5HMBHcg9CRAQMygLegUIARCAAg"
)

PRODUCE_IMAGE_URL = (
    "https://www.google.com/imgres?imgurl=https%3A%2F%2F5.imimg.com%2Fdata5"
    "%2FCJ%2FGC%2FWB%2FSELLER-1177031%2Fwooden-beehive-box-500x500.jpg"
    "&tbnid=fQ3GXsWFhXD6pM&vet=12ahUKEwjBi-rQ68f-AhUL-nMBHVIfAhIQMygKegUIARCLAg..i"
    "&imgrefurl=https%3A%2F%2Fwww.indiamart.com"
    "%2Fproddetail%2Fwooden-beehive-box-with-honey-bees-20959147173.html"
    "&docid=FahB3lcm3XrfKM&w=500&h=500&q=honey%20in%20a%20box%20images"
    "&ved=2ahUKEwjBi-rQ68f-AhUL-nMBHVIfAhIQMygKegUIARCLAg"
)

# (name, quantity, price, (lat, lng), actor, image_url)
_SEED_ROWS = (
    ("Apple", "100 cartons", 30, (19.5, 72.0), Actor.CONSUMER, APPLE_IMAGE_URL),
    ("Honey", "500 jars", 350, (20.0, -30.0), Actor.CONSUMER, PRODUCE_IMAGE_URL),
    ("Jam", "1000 bottles", 60, (50.0, 10.1), Actor.CONSUMER, PRODUCE_IMAGE_URL),
    ("Mango", "20 boxes", 450, (21.01, 72.0), Actor.PRODUCER, PRODUCE_IMAGE_URL),
    ("Grapes", "25kgs", 125, (25.44, 91.0), Actor.RETAILER, PRODUCE_IMAGE_URL),
    ("Onion", "1000 kgs", 25, (12.45, 27.0), Actor.CONSUMER, PRODUCE_IMAGE_URL),
    ("Oranges", "10kgs", 100, (86.5, 31.01), Actor.CONSUMER, PRODUCE_IMAGE_URL),
    ("Cheese", "25 boxes", 183, (56.65, 45.12), Actor.CONSUMER, PRODUCE_IMAGE_URL),
)


def seed_catalog() -> tuple[Product, ...]:
    return tuple(
        Product(
            product_id=str(position),
            name=name,
            quantity=quantity,
            price=price,
            location=Location(lat=lat, lng=lng),
            actor=actor,
            image_url=image_url,
        )
        for position, (name, quantity, price, (lat, lng), actor, image_url)
        in enumerate(_SEED_ROWS, start=1)
    )


SEED_CATALOG = seed_catalog()
