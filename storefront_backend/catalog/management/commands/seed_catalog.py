# catalog/management/commands/seed_catalog.py

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import Category, Product

UNSPLASH = "https://images.unsplash.com/"


@dataclass(frozen=True)
class SeedProductSpec:
    name: str
    category: str
    price: Decimal
    rating: float
    image: str
    description: str
    features: list = field(default_factory=list)
    dimensions: dict = field(default_factory=dict)


SEED_CATEGORIES = {
    "Living Room": (Category.Type.BRAND_NEW, "Sofas, coffee tables and lounge pieces."),
    "Dining": (Category.Type.IMPORTED_USED, "Restored dining tables and sets."),
    "Bedroom": (Category.Type.IMPORTED_USED, "Beds, dressers and wardrobes."),
    "Office": (Category.Type.BRAND_NEW, "Desks and chairs for the home office."),
}

SEED_PRODUCTS = [
    SeedProductSpec(
        name="Elegant Leather Sofa",
        category="Living Room",
        price=Decimal("189000.00"),
        rating=4.9,
        image=UNSPLASH + "photo-1567016432779-094069958ea5",
        description=(
            "This elegant leather sofa combines comfort and style with premium "
            "materials and expert craftsmanship."
        ),
        features=[
            "Genuine premium leather upholstery",
            "Solid wood frame for durability",
            "Comfortable high-density foam cushions",
        ],
        dimensions={"width": "220 cm", "depth": "95 cm", "height": "85 cm"},
    ),
    SeedProductSpec(
        name="Vintage Dining Table",
        category="Dining",
        price=Decimal("156000.00"),
        rating=4.7,
        image=UNSPLASH + "photo-1604578762246-41134e37f9cc",
        description=(
            "A beautiful vintage dining table imported from Europe, featuring "
            "detailed craftsmanship and a rich history."
        ),
        features=["Solid oak construction", "Hand-carved details", "Seats 8 people"],
        dimensions={"width": "200 cm", "depth": "100 cm", "height": "75 cm"},
    ),
    SeedProductSpec(
        name="Modern Coffee Table",
        category="Living Room",
        price=Decimal("48000.00"),
        rating=4.8,
        image="https://plus.unsplash.com/premium_photo-1680546330888-f995d2d64571",
        description=(
            "A sleek, modern coffee table with a minimalist design that "
            "complements any contemporary living space."
        ),
        features=["Tempered glass top", "Brushed stainless steel frame"],
        dimensions={"width": "120 cm", "depth": "60 cm", "height": "40 cm"},
    ),
    SeedProductSpec(
        name="Premium Queen Bed",
        category="Bedroom",
        price=Decimal("220000.00"),
        rating=5.0,
        image=UNSPLASH + "photo-1634344656611-0773d8dbbe2c",
        description=(
            "An elegant queen-sized bed frame imported from Italy, featuring a "
            "tufted headboard and solid wood construction."
        ),
        features=["Imported Italian design", "Button-tufted headboard"],
        dimensions={"width": "160 cm", "length": "200 cm", "height": "120 cm"},
    ),
    SeedProductSpec(
        name="Executive Office Desk",
        category="Office",
        price=Decimal("175000.00"),
        rating=4.6,
        image=UNSPLASH + "photo-1518455027359-f3f8164ba6bd",
        description=(
            "A premium executive office desk designed for professionals who "
            "value both aesthetics and functionality."
        ),
        features=["Mahogany veneer", "Built-in cable management system"],
        dimensions={"width": "180 cm", "depth": "80 cm", "height": "75 cm"},
    ),
    SeedProductSpec(
        name="Vintage Dresser",
        category="Bedroom",
        price=Decimal("89000.00"),
        rating=4.5,
        image=UNSPLASH + "photo-1724093835399-72d8e0eb1f3a",
        description=(
            "A beautifully restored vintage dresser with intricate detailing "
            "and plenty of storage space."
        ),
        features=["Solid wood construction", "Six spacious drawers"],
        dimensions={"width": "120 cm", "depth": "50 cm", "height": "90 cm"},
    ),
]


class Command(BaseCommand):
    help = "Seed sample furniture categories and products (idempotent by name)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete all products and categories before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options.get("reset"):
            deleted, _ = Product.objects.all().delete()
            Category.objects.all().delete()
            self.stdout.write(f"Removed {deleted} product(s) and all categories.")

        categories = {}
        created_categories = 0
        for name, (type_, description) in SEED_CATEGORIES.items():
            category, created = Category.objects.get_or_create(
                name=name, defaults={"type": type_, "description": description}
            )
            categories[name] = category
            created_categories += int(created)

        created_products = 0
        for spec in SEED_PRODUCTS:
            _, created = Product.objects.get_or_create(
                name=spec.name,
                defaults={
                    "category": categories[spec.category],
                    "price": spec.price,
                    "rating": spec.rating,
                    "image": spec.image,
                    "description": spec.description,
                    "features": list(spec.features),
                    "dimensions": dict(spec.dimensions),
                },
            )
            created_products += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog seeded: {created_categories} new categories, "
                f"{created_products} new products."
            )
        )
