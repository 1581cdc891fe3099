import threading

from returns.result import Failure, Success

from order_desk.core.domain.model.errors import DuplicateKey, OrderNotFound
from order_desk.core.domain.model.order import CustomerName, LineItem, Order, OrderId


def _order(order_id, customer="Alice", *amounts):
    return Order(
        order_id=OrderId(order_id),
        customer=CustomerName(customer),
        items=tuple(LineItem("p", a) for a in amounts),
    )


def test_add_then_get(repo):
    order = _order("A", "Alice", 1.0)

    assert repo.add(order) == Success(OrderId("A"))
    assert repo.get(OrderId("A")).unwrap() is order


def test_add_duplicate_keeps_existing(repo):
    original = _order("A", "Alice", 1.0)
    repo.add(original)

    result = repo.add(_order("A", "Mallory", 99.0))

    assert isinstance(result, Failure)
    assert isinstance(result.failure(), DuplicateKey)
    assert repo.get(OrderId("A")).unwrap() is original
    assert len(repo.all().unwrap()) == 1


def test_remove_missing_is_not_found_and_store_unchanged(repo):
    repo.add(_order("A"))

    result = repo.remove(OrderId("nope"))

    assert isinstance(result.failure(), OrderNotFound)
    assert len(repo.all().unwrap()) == 1


def test_remove_returns_removed_order(repo):
    order = _order("A")
    repo.add(order)

    assert repo.remove(OrderId("A")).unwrap() is order
    assert len(repo.all().unwrap()) == 0
    assert isinstance(repo.get(OrderId("A")).failure(), OrderNotFound)


def test_rename_customer_keeps_position(repo):
    for oid in ("A", "B", "C"):
        repo.add(_order(oid))

    updated = repo.rename_customer(OrderId("A"), CustomerName("Zed")).unwrap()

    assert updated.customer == CustomerName("Zed")
    ids = [o.order_id.value for o in repo.all().unwrap()]
    assert ids == ["A", "B", "C"]


def test_rename_customer_missing(repo):
    result = repo.rename_customer(OrderId("A"), CustomerName("Zed"))
    assert isinstance(result.failure(), OrderNotFound)
    assert len(repo.all().unwrap()) == 0


def test_all_is_a_snapshot(repo):
    repo.add(_order("A"))
    snapshot = repo.all().unwrap()
    repo.add(_order("B"))

    assert len(snapshot) == 1


def test_concurrent_adds_of_same_id_store_one(repo):
    results = []
    barrier = threading.Barrier(8)

    def worker(n):
        barrier.wait()
        results.append(repo.add(_order("same", f"c{n}")))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(isinstance(r, Success) for r in results) == 1
    assert len(repo.all().unwrap()) == 1
