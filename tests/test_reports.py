import unittest
from datetime import datetime, timedelta

from models import MovementType, StockMovement
from reports import (
    current_stock_lines,
    current_stock_report,
    format_movement,
    product_detail,
    product_movements,
    recent_movements,
    recent_movements_report,
    stock_level_series,
)
from store import InventoryStore

from tests.helpers import StepClock


class CurrentStockReportTest(unittest.TestCase):
    def test_lines_in_store_order(self):
        store = InventoryStore()
        store.register_product("X1", "Loose part", None, 4)
        self.assertEqual(current_stock_lines(store), [
            "P001 | Screw 4mm | Qty: 100 | Supplier: Supplier A",
            "P002 | Nut 4mm | Qty: 200 | Supplier: Supplier A",
            "P003 | Arduino Board | Qty: 15 | Supplier: Supplier B",
            "X1 | Loose part | Qty: 4 | Supplier: —",
        ])

    def test_report_has_title(self):
        text = current_stock_report(InventoryStore(seed=False))
        self.assertTrue(text.startswith("Report - Current Stock"))


class RecentMovementsTest(unittest.TestCase):
    def setUp(self):
        self.clock = StepClock()
        self.store = InventoryStore(seed=False, clock=self.clock)
        self.p = self.store.register_product("A1", "Item", None, 0)

    def test_sixty_movements_keeps_last_fifty_ascending(self):
        for i in range(60):
            self.store.stock_in(self.p, None, 1, f"n{i}")
        rows = recent_movements(self.store)
        self.assertEqual(len(rows), 50)
        self.assertEqual([m.note for m in rows], [f"n{i}" for i in range(10, 60)])
        self.assertEqual(rows, sorted(rows, key=lambda m: m.ts))

    def test_fewer_than_limit_shows_all(self):
        for i in range(3):
            self.store.stock_in(self.p, None, 1)
        self.assertEqual(len(recent_movements(self.store)), 3)

    def test_sorted_by_timestamp_not_insertion(self):
        base = datetime(2026, 2, 1, 12, 0)
        late = StockMovement(self.p, 1, MovementType.IN, base, None, "late")
        early = StockMovement(self.p, 1, MovementType.IN, base - timedelta(days=3), None, "early")
        self.store.movements.extend([late, early])
        self.assertEqual([m.note for m in recent_movements(self.store)], ["early", "late"])

    def test_equal_timestamps_keep_insertion_order(self):
        ts = datetime(2026, 2, 1, 12, 0)
        for note in ("a", "b", "c"):
            self.store.movements.append(StockMovement(self.p, 1, MovementType.IN, ts, None, note))
        self.assertEqual([m.note for m in recent_movements(self.store, limit=2)], ["b", "c"])

    def test_report_lines(self):
        sup = self.store.add_supplier("Supplier A", "")
        self.store.stock_in(self.p, sup, 5, "restock")
        self.store.stock_out(self.p, 2)
        text = recent_movements_report(self.store)
        lines = text.splitlines()
        self.assertEqual(lines[0], "Report - Movements (last 50)")
        self.assertEqual(lines[2], "[01/01/2026 09:00] +5 A1 - Item (Supplier A) -- restock")
        self.assertEqual(lines[3], "[01/01/2026 09:01] -2 A1 - Item -- manual exit")


class ProductDetailTest(unittest.TestCase):
    def setUp(self):
        self.store = InventoryStore(clock=StepClock())

    def test_product_movements_newest_first_limited(self):
        p = self.store.get_product("P001")
        other = self.store.get_product("P002")
        for i in range(12):
            self.store.stock_in(p, None, 1, f"n{i}")
            self.store.stock_in(other, None, 1)
        rows = product_movements(self.store, p)
        self.assertEqual(len(rows), 10)
        self.assertTrue(all(m.product is p for m in rows))
        self.assertEqual(rows[0].note, "n11")
        self.assertEqual(rows, sorted(rows, key=lambda m: m.ts, reverse=True))

    def test_detail_text(self):
        p = self.store.get_product("P003")
        text = product_detail(self.store, p)
        self.assertIn("Code: P003", text)
        self.assertIn("Current quantity: 15", text)
        self.assertIn("Preferred supplier: Supplier B (contact@sb.com)", text)
        self.assertIn("-5 P003 - Arduino Board -- sale", text)

    def test_detail_without_supplier(self):
        p = self.store.register_product("X1", "Loose", None, 0)
        text = product_detail(self.store, p)
        self.assertIn("Preferred supplier: —", text)
        self.assertTrue(text.rstrip().endswith("Recent movements:"))


class StockLevelSeriesTest(unittest.TestCase):
    def test_series_ends_at_current_quantity(self):
        store = InventoryStore(seed=False, clock=StepClock())
        p = store.register_product("A1", "Item", None, 10)
        store.stock_in(p, None, 5)
        store.stock_out(p, 8)
        levels = [q for _, q in stock_level_series(store, p)]
        self.assertEqual(levels, [10, 15, 7])

    def test_series_for_product_without_movements(self):
        store = InventoryStore(seed=False)
        p = store.register_product("A1", "Item", None, 0)
        self.assertEqual(stock_level_series(store, p), [])

    def test_format_movement_in_without_supplier(self):
        store = InventoryStore(seed=False)
        p = store.register_product("A1", "Item", None, 0)
        m = StockMovement(p, 3, MovementType.IN, datetime(2026, 3, 4, 5, 6), None, "x")
        self.assertEqual(format_movement(m), "[04/03/2026 05:06] +3 A1 - Item -- x")


if __name__ == "__main__":
    unittest.main()
