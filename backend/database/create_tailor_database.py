# backend/database/create_tailor_database.py
"""
יצירה/שדרוג מסד הנתונים:
- יוצר את כלל הטבלאות מתוך המודלים (טבלאות קיימות לא משתנות).
- מזין את טבלאות העזר: תפקידים וסוגי מוצרים.
- מציג סיכום מצב מסד הנתונים.

להרצה (מתוך backend/):
    python -m database.create_tailor_database
"""

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine

import models
from database.session import Base, dispose_engine, get_engine

ROLE_DESCRIPTIONS = {
    "Admin": "System administrator",
    "Customer": "Places orders",
    "Seller": "Sells fabric and products",
    "Tailor": "Stitches ordered items",
    "MeasurementBoy": "Takes customer measurements",
    "Taylorseller": "Tailor who also sells",
}

PRODUCT_TYPES = ("UnstitchedFabricProduct", "StitchedProduct", "Accessory")


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(engine)


def seed_lookups(engine: Engine) -> int:
    """Insert missing roles and product types; returns the number of rows added."""
    roles = models.Role.__table__
    product_types = models.ProductType.__table__
    added = 0
    with engine.begin() as conn:
        existing = set(conn.execute(select(roles.c.roleName)).scalars())
        for name in models.ROLE_NAMES:
            if name not in existing:
                conn.execute(insert(roles).values(roleName=name, description=ROLE_DESCRIPTIONS.get(name)))
                added += 1

        existing = set(conn.execute(select(product_types.c.name)).scalars())
        for name in PRODUCT_TYPES:
            if name not in existing:
                conn.execute(insert(product_types).values(name=name, is_active=True))
                added += 1
    return added


def show_summary(engine: Engine) -> None:
    print("\n📈 סיכום DB:")
    with engine.connect() as conn:
        for table in Base.metadata.sorted_tables:
            count = conn.execute(select(func.count()).select_from(table)).scalar_one()
            print(f"  {table.name}: {count}")


def main():
    print("🚀 התחלת תהליך יצירת/שדרוג DB")
    print("=" * 60)
    engine = get_engine()
    try:
        create_tables(engine)
        print("✅ טבלאות נוצרו/שודרגו בהצלחה.")
        added = seed_lookups(engine)
        print(f"✅ נתוני עזר: {added} רשומות חדשות.")
        show_summary(engine)
    finally:
        dispose_engine()

    print("\n🎉 הסתיים. אפשר להפעיל את השרת FastAPI ולבדוק את ה-API.")


if __name__ == "__main__":
    main()
