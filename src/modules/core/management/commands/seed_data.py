from __future__ import annotations

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.categories.models import Category
from modules.products.models import Product, ProductStatus
from modules.variants.models import Variant, normalize_sku

CATEGORIES = [
    ("Proteins", "Beef, poultry, seafood, and plant-based proteins"),
    ("Produce", "Fresh fruits, vegetables, and herbs"),
    ("Dairy & Eggs", "Milk, cheese, butter, cream, and eggs"),
    ("Dry Goods & Pantry", "Grains, pasta, oils, sauces, and shelf-stable staples"),
    ("Beverages", "Coffee, tea, juices, and fountain supplies"),
    ("Kitchen Supplies", "Disposables, cleaning products, and smallwares"),
]

# (name, description, category, status, deleted, days_ago, variants)
# variant: (sku, name, price_cents, inventory_count)
CATALOG = [
    # Proteins
    ("Angus Beef Patties", "80/20 blend Angus beef patties, hand-formed. Flash-frozen for freshness.",
     "Proteins", ProductStatus.ACTIVE, False, 45, [
         ("ABP-4OZ", "4 oz (case of 40)", 8999, 35),
         ("ABP-6OZ", "6 oz (case of 30)", 10999, 28),
         ("ABP-8OZ", "8 oz (case of 20)", 11999, 15),
     ]),
    ("Boneless Skinless Chicken Breast", "All-natural boneless skinless chicken breast. No antibiotics ever.",
     "Proteins", ProductStatus.ACTIVE, False, 30, [
         ("BSCB-5LB", "5 lb bag", 2199, 80),
         ("BSCB-10LB", "10 lb case", 3999, 45),
         ("BSCB-40LB", "40 lb case", 13999, 12),
     ]),
    ("Atlantic Salmon Fillet", "Fresh Atlantic salmon fillets, skin-on, pin-bone removed. Farm-raised.",
     "Proteins", ProductStatus.ACTIVE, False, 12, [
         ("ASF-6OZ", "6 oz portion (case of 20)", 15999, 10),
         ("ASF-8OZ", "8 oz portion (case of 16)", 18999, 8),
     ]),
    ("Plant-Based Burger Patty", "Soy and pea protein blend patty. Vegan, non-GMO.",
     "Proteins", ProductStatus.DRAFT, False, 5, [
         ("PBP-4OZ", "4 oz (case of 40)", 12999, 20),
     ]),
    ("Applewood Smoked Bacon", "Thick-cut applewood smoked bacon. Cured with sea salt and brown sugar.",
     "Proteins", ProductStatus.ACTIVE, False, 38, [
         ("ASB-5LB", "5 lb slab", 3499, 50),
         ("ASB-15LB", "15 lb case", 9499, 18),
     ]),
    ("Jumbo Shrimp 16/20", "Wild-caught Gulf shrimp, peeled and deveined. IQF frozen.",
     "Proteins", ProductStatus.ACTIVE, False, 20, [
         ("JS-2LB", "2 lb bag", 2499, 40),
         ("JS-5LB", "5 lb case", 5499, 22),
     ]),
    # Produce
    ("Romaine Lettuce Hearts", "Crisp romaine hearts, triple-washed and ready to use.",
     "Produce", ProductStatus.ACTIVE, False, 8, [
         ("RLH-3CT", "3-count pack", 499, 120),
         ("RLH-CS24", "Case of 24", 3299, 25),
     ]),
    ("Vine-Ripened Tomatoes", "Greenhouse-grown vine-ripened tomatoes. Firm and flavorful.",
     "Produce", ProductStatus.ACTIVE, False, 6, [
         ("VRT-5LB", "5 lb box", 899, 65),
         ("VRT-25LB", "25 lb case", 3499, 15),
     ]),
    ("Yellow Onions", "U.S. #1 grade yellow onions. Ideal for cooking and caramelizing.",
     "Produce", ProductStatus.ACTIVE, False, 14, [
         ("YO-3LB", "3 lb bag", 349, 200),
         ("YO-50LB", "50 lb sack", 3999, 30),
     ]),
    ("Fresh Basil Bunch", "Fragrant Italian sweet basil. Locally sourced when in season.",
     "Produce", ProductStatus.ACTIVE, False, 3, [
         ("FBB-1BN", "Single bunch", 299, 45),
         ("FBB-12BN", "Case of 12", 2799, 8),
     ]),
    ("Russet Potatoes", "Premium Idaho Russet potatoes. Great for baking, frying, or mashing.",
     "Produce", ProductStatus.ACTIVE, False, 18, [
         ("RP-10LB", "10 lb bag", 799, 90),
         ("RP-50LB", "50 lb case", 2999, 20),
     ]),
    ("Organic Baby Spinach", "Pre-washed organic baby spinach. Discontinued supplier.",
     "Produce", ProductStatus.ACTIVE, True, 60, [
         ("OBS-1LB", "1 lb clamshell", 599, 3),
         ("OBS-2.5LB", "2.5 lb bag", 1199, 0),
     ]),
    # Dairy & Eggs
    ("Heavy Whipping Cream", "Grade A heavy whipping cream, 36% milkfat. Ultra-pasteurized.",
     "Dairy & Eggs", ProductStatus.ACTIVE, False, 10, [
         ("HWC-QT", "Quart", 599, 60),
         ("HWC-HG", "Half gallon", 999, 35),
     ]),
    ("Shredded Mozzarella Cheese", "Low-moisture part-skim mozzarella. Perfect melt for pizza and pasta.",
     "Dairy & Eggs", ProductStatus.ACTIVE, False, 22, [
         ("SMC-5LB", "5 lb bag", 1999, 55),
         ("SMC-20LB", "20 lb case", 6999, 12),
     ]),
    ("Large Grade AA Eggs", "Farm-fresh large Grade AA eggs. Cage-free.",
     "Dairy & Eggs", ProductStatus.ACTIVE, False, 15, [
         ("EGG-15DZ", "15 dozen case", 4499, 40),
         ("EGG-30DZ", "30 dozen case", 7999, 0),
     ]),
    ("Unsalted Butter", "European-style unsalted butter, 83% butterfat. Ideal for baking and sauces.",
     "Dairy & Eggs", ProductStatus.ACTIVE, False, 28, [
         ("UB-1LB", "1 lb block", 599, 100),
         ("UB-36LB", "36 lb case", 16999, 5),
     ]),
    ("Crumbled Feta Cheese", "Traditional Mediterranean-style feta, pre-crumbled for salads and toppings.",
     "Dairy & Eggs", ProductStatus.DRAFT, False, 4, [
         ("CFC-2LB", "2 lb tub", 1299, 18),
     ]),
    # Dry Goods & Pantry
    ("Extra Virgin Olive Oil", "First cold-pressed extra virgin olive oil. Imported from Italy.",
     "Dry Goods & Pantry", ProductStatus.ACTIVE, False, 50, [
         ("EVOO-1L", "1 Liter bottle", 1499, 70),
         ("EVOO-3L", "3 Liter tin", 3499, 30),
         ("EVOO-5GAL", "5 gallon jug", 11999, 8),
     ]),
    ("San Marzano Crushed Tomatoes", "DOP-certified San Marzano tomatoes, hand-crushed with basil.",
     "Dry Goods & Pantry", ProductStatus.ACTIVE, False, 35, [
         ("SMCT-28OZ", "28 oz can", 499, 150),
         ("SMCT-CS6", "Case of 6", 2499, 40),
     ]),
    ("All-Purpose Flour", "Unbleached enriched all-purpose flour. Consistent protein content for versatile use.",
     "Dry Goods & Pantry", ProductStatus.ACTIVE, False, 42, [
         ("APF-5LB", "5 lb bag", 499, 110),
         ("APF-25LB", "25 lb bag", 1699, 45),
         ("APF-50LB", "50 lb bag", 2999, 20),
     ]),
    ("Jasmine Rice", "Premium Thai jasmine rice. Aromatic long-grain, naturally gluten-free.",
     "Dry Goods & Pantry", ProductStatus.ACTIVE, False, 25, [
         ("JR-5LB", "5 lb bag", 799, 85),
         ("JR-25LB", "25 lb bag", 2999, 30),
         ("JR-50LB", "50 lb bag", 4999, 10),
     ]),
    ("Sriracha Hot Sauce (Original)", "Classic rooster brand sriracha. Recalled lot, discontinued.",
     "Dry Goods & Pantry", ProductStatus.ACTIVE, True, 55, [
         ("SHS-17OZ", "17 oz bottle", 499, 2),
         ("SHS-28OZ", "28 oz bottle", 799, 0),
     ]),
    # Beverages
    ("Cold Brew Coffee Concentrate", "Slow-steeped 12-hour cold brew concentrate. Dilute 1:1 with water or milk.",
     "Beverages", ProductStatus.ACTIVE, False, 16, [
         ("CBC-32OZ", "32 oz bottle", 1299, 45),
         ("CBC-1GAL", "1 gallon jug", 3499, 15),
     ]),
    ("Orange Juice (Not from Concentrate)", "Fresh-squeezed style premium orange juice. No added sugar.",
     "Beverages", ProductStatus.ACTIVE, False, 9, [
         ("OJ-HG", "Half gallon", 699, 55),
         ("OJ-GAL", "1 gallon", 1099, 30),
     ]),
    ("Chai Tea Latte Mix", "Spiced black tea latte powder mix. Just add steamed milk.",
     "Beverages", ProductStatus.DRAFT, False, 2, [
         ("CTL-2LB", "2 lb canister", 1999, 25),
     ]),
    ("Lemonade Syrup", "Real lemon juice base syrup for fountain or hand-mixed lemonade.",
     "Beverages", ProductStatus.ACTIVE, False, 32, [
         ("LS-64OZ", "64 oz bottle", 1299, 40),
         ("LS-1GAL", "1 gallon jug", 1999, 20),
     ]),
    # Kitchen Supplies
    ("Nitrile Disposable Gloves", "Powder-free nitrile gloves. FDA food-contact approved.",
     "Kitchen Supplies", ProductStatus.ACTIVE, False, 40, [
         ("NDG-S", "Small (box of 100)", 1299, 60),
         ("NDG-M", "Medium (box of 100)", 1299, 90),
         ("NDG-L", "Large (box of 100)", 1299, 75),
         ("NDG-XL", "X-Large (box of 100)", 1299, 40),
     ]),
    ("Kraft Paper Takeout Containers", "Eco-friendly kraft paper containers with fold-over lid. Microwave safe.",
     "Kitchen Supplies", ProductStatus.ACTIVE, False, 26, [
         ("KTC-26OZ", "26 oz (case of 200)", 4999, 30),
         ("KTC-46OZ", "46 oz (case of 150)", 5999, 18),
     ]),
    ("Stainless Steel Mixing Bowls", "Heavy-duty stainless steel mixing bowls. Flat base, rolled rim.",
     "Kitchen Supplies", ProductStatus.ACTIVE, False, 48, [
         ("SSMB-3QT", "3 Quart", 1299, 0),
         ("SSMB-5QT", "5 Quart", 1699, 4),
         ("SSMB-8QT", "8 Quart", 2199, 12),
     ]),
    ("Commercial Degreaser Spray", "Heavy-duty kitchen degreaser. Cuts through grease on contact.",
     "Kitchen Supplies", ProductStatus.ACTIVE, False, 34, [
         ("CDS-32OZ", "32 oz spray bottle", 799, 85),
         ("CDS-1GAL", "1 gallon refill", 1999, 25),
     ]),
]


class Command(BaseCommand):
    help = "Seed the database with the sample product catalogue."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Remove every category, product and variant before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            self._reset()

        self.stdout.write("Seeding catalogue data...")
        categories = self._seed_categories()
        products, variants = self._seed_products(categories)

        deleted = Product.objects.dead().count()
        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={len(categories)}, "
                f"products={products} ({deleted} soft-deleted), "
                f"variants={variants}"
            )
        )

    def _reset(self) -> None:
        self.stdout.write("Removing existing catalogue...")
        # Products are soft-deleted by default; PROTECT requires this order.
        Variant.objects.all().delete()
        Product.objects.all().hard_delete()
        Category.objects.all().delete()

    def _seed_categories(self) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for name, description in CATEGORIES:
            category, _ = Category.objects.get_or_create(
                name=name, defaults={"description": description}
            )
            categories[name] = category
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> tuple[int, int]:
        now = timezone.now()
        for name, description, category, status, deleted, days_ago, variants in CATALOG:
            product, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "category": categories[category],
                    "status": status,
                },
            )
            if created:
                Product.objects.filter(pk=product.pk).update(
                    created_at=now - timedelta(days=days_ago),
                    deleted_at=now if deleted else None,
                )

            for sku, variant_name, price_cents, inventory_count in variants:
                Variant.objects.get_or_create(
                    sku_key=normalize_sku(sku),
                    defaults={
                        "sku": sku,
                        "product": product,
                        "name": variant_name,
                        "price_cents": price_cents,
                        "inventory_count": inventory_count,
                    },
                )

        return Product.objects.count(), Variant.objects.count()
