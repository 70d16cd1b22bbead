import copy
from datetime import date

from nutrix.sales import SalesService


class FakeCollection:
    def __init__(self):
        self.docs = []

    def _matching(self, query):
        return [d for d in self.docs if all(d.get(k) == v for k, v in query.items())]

    def count_documents(self, query):
        return len(self._matching(query))

    def insert_one(self, doc):
        stored = copy.deepcopy(doc)
        stored["_id"] = len(self.docs) + 1
        self.docs.append(stored)

    def update_one(self, query, update, upsert=False):
        matches = self._matching(query)
        if not matches:
            return
        doc = matches[0]
        for key, value in update.get("$push", {}).items():
            doc.setdefault(key, []).append(copy.deepcopy(value))
        for key, value in update.get("$inc", {}).items():
            doc[key] = doc.get(key, 0) + value

    def find(self, query, sort=None, skip=0, limit=0):
        docs = self._matching(query)
        for key, direction in reversed(sort or []):
            docs = sorted(docs, key=lambda d: d.get(key), reverse=direction == -1)
        docs = docs[skip:]
        if limit:
            docs = docs[:limit]
        return [copy.deepcopy(d) for d in docs]


class FakeDatabase(dict):
    def __missing__(self, key):
        self[key] = FakeCollection()
        return self[key]


def service(db, day=date(2024, 5, 1)):
    return SalesService(db, today=lambda: day)


def test_first_order_creates_day():
    db = FakeDatabase()
    order = {"id": "o1", "cost": 4.0, "sale_price": 10.0}
    costs = [{"item_name": "Pizza", "cost": 4.0}]
    service(db).add_order_to_sales_day(order, costs)
    [doc] = db["sales"].docs
    assert doc["date"] == "2024-05-01"
    assert doc["costs"] == 4.0
    assert doc["total_sales"] == 10.0
    assert doc["orders"] == [{"order": order, "costs": costs}]


def test_second_order_same_day_accumulates():
    db = FakeDatabase()
    svc = service(db)
    svc.add_order_to_sales_day({"id": "o1", "cost": 4.0, "sale_price": 10.0}, [])
    svc.add_order_to_sales_day({"id": "o2", "cost": 1.0, "sale_price": 3.0}, [])
    [doc] = db["sales"].docs
    assert doc["costs"] == 4.0 + 1.0
    assert doc["total_sales"] == 10.0 + 3.0
    assert [o["order"]["id"] for o in doc["orders"]] == ["o1", "o2"]


def test_orders_on_different_days_are_separate():
    db = FakeDatabase()
    service(db, date(2024, 5, 1)).add_order_to_sales_day({"id": "o1", "cost": 1.0, "sale_price": 2.0}, [])
    service(db, date(2024, 5, 2)).add_order_to_sales_day({"id": "o2", "cost": 1.0, "sale_price": 2.0}, [])
    assert sorted(d["date"] for d in db["sales"].docs) == ["2024-05-01", "2024-05-02"]


def test_sales_per_day_newest_first_with_paging():
    db = FakeDatabase()
    for day in (date(2024, 5, 1), date(2024, 5, 3), date(2024, 5, 2)):
        service(db, day).add_order_to_sales_day({"id": "o", "cost": 1.0, "sale_price": 2.0}, [])
    svc = service(db)
    first_page, total = svc.get_sales_per_day(1, 2)
    second_page, _ = svc.get_sales_per_day(2, 2)
    assert total == 3
    assert [d["date"] for d in first_page] == ["2024-05-03", "2024-05-02"]
    assert [d["date"] for d in second_page] == ["2024-05-01"]
    assert all("_id" not in d for d in first_page + second_page)


def test_sales_per_day_empty():
    days, total = service(FakeDatabase()).get_sales_per_day(1, 10)
    assert days == []
    assert total == 0