import argparse
import random

from faker import Faker

from inventory_tracker.core.config import settings
from inventory_tracker.core.dependencies import get_worksheet
from inventory_tracker.schemas.item import ItemCreate
from inventory_tracker.services.inventory_service import (
    create_item,
    delete_item,
    get_all_items,
    initialize_sheet,
)
from inventory_tracker.utils.stock import CATEGORIES, UNITS

# name, category, quantity, unit, min stock, price, supplier
SAMPLE_ITEMS = [
    ("Milk", "Dairy", 1000, "liters", 2000, 0.02, "Highland"),
    ("Coffee Beans (Arabica)", "Beverages", 45, "kg", 20, 2500, "Ceylon Coffee Co."),
    ("All-Purpose Flour", "Baking", 12, "kg", 25, 150, "Prima Flour Mills"),
    ("Eggs", "Dairy", 120, "pieces", 100, 35, "Farm Fresh Kandy"),
    ("Sugar", "Baking", 30, "kg", 15, 180, "Local Supplier"),
    ("Rice (Basmati)", "Grains & Pasta", 100, "kg", 50, 250, "Premium Rice Co."),
    ("Chicken Breast", "Meat & Poultry", 18, "kg", 20, 1200, "Crysbro"),
    ("Tomatoes", "Vegetables", 25, "kg", 10, 220, "Dambulla Market"),
    ("Black Pepper", "Spices & Condiments", 3, "kg", 2, 1800, "Spice Island"),
    ("Dish Soap", "Cleaning Supplies", 6, "bottles", 8, 450, "CleanPro"),
]

fake = Faker()


def fake_item() -> ItemCreate:
    return ItemCreate(
        name=fake.word().capitalize(),
        category=random.choice(CATEGORIES),
        quantity=random.randint(0, 200),
        unit=random.choice(UNITS),
        min_stock=random.randint(5, 50),
        price=round(random.uniform(10, 3000), 2),
        supplier=fake.company(),
    )


def main():
    parser = argparse.ArgumentParser(description="Populate the inventory sheet with sample data.")
    parser.add_argument("--clear", action="store_true", help="delete existing items first")
    parser.add_argument("--fake", type=int, default=0, metavar="N", help="also add N random items")
    args = parser.parse_args()

    if settings.STORE_BACKEND == "memory":
        print("⚠️  STORE_BACKEND is 'memory'; seeded data is lost when this script exits.")

    sheet = get_worksheet()
    initialize_sheet(sheet)

    if args.clear:
        print("🔄 Clearing existing items...")
        for item in get_all_items(sheet):
            delete_item(sheet, item.id)
        print("✅ Items cleared.")

    print("🔄 Adding sample items...")
    for name, category, quantity, unit, min_stock, price, supplier in SAMPLE_ITEMS:
        create_item(sheet, ItemCreate(
            name=name,
            category=category,
            quantity=quantity,
            unit=unit,
            min_stock=min_stock,
            price=price,
            supplier=supplier,
        ))
    print(f"✅ Seeded {len(SAMPLE_ITEMS)} sample items")

    for _ in range(args.fake):
        create_item(sheet, fake_item())
    if args.fake:
        print(f"✅ Seeded {args.fake} random items")


if __name__ == '__main__':
    main()
