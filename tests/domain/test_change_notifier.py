"""Unit tests for repository change notification."""

from datetime import date

from sis.domain.model.inventory import Batch, Category, InventoryItem
from sis.domain.repository.change_notifier import ChangeNotifier
from tests.fakes import FakeInventoryRepository


def _item(item_id: str = "1") -> InventoryItem:
    return InventoryItem(id=item_id, name=f"Item {item_id}", category=Category.OTHER)


class TestSubscribe:

    def test_fires_immediately_with_snapshot(self):
        repo = FakeInventoryRepository([_item()])
        received = []

        repo.subscribe(received.append)

        assert received == [[_item()]]

    def test_fires_on_save_and_delete(self):
        repo = FakeInventoryRepository([_item()])
        received = []
        repo.subscribe(received.append)

        repo.save(_item("2"))
        repo.delete("1")

        assert len(received) == 3
        assert [i.id for i in received[1]] == ["1", "2"]
        assert [i.id for i in received[2]] == ["2"]

    def test_unsubscribe_stops_notifications(self):
        repo = FakeInventoryRepository([_item()])
        received = []
        unsubscribe = repo.subscribe(received.append)

        unsubscribe()
        repo.save(_item("2"))

        assert len(received) == 1

    def test_unsubscribe_twice_is_harmless(self):
        repo = FakeInventoryRepository()
        unsubscribe = repo.subscribe(lambda items: None)
        unsubscribe()
        unsubscribe()

    def test_snapshot_is_a_copy(self):
        repo = FakeInventoryRepository([_item()])
        received = []
        repo.subscribe(received.append)

        received[0].clear()

        assert len(repo.list_all()) == 1

    def test_listener_may_unsubscribe_during_publish(self):
        notifier = ChangeNotifier()
        calls = []
        handles = {}

        def once(items):
            calls.append(len(items))
            if "unsub" in handles:
                handles["unsub"]()

        handles["unsub"] = notifier.subscribe(once, [])
        notifier.publish([_item()])
        notifier.publish([_item()])

        assert calls == [0, 1]
        assert notifier.listener_count == 0

    def test_injected_notifier_is_used(self):
        notifier = ChangeNotifier()
        repo = FakeInventoryRepository(notifier=notifier)
        received = []
        repo.subscribe(received.append)

        repo.save(
            InventoryItem(
                id="x",
                name="Cake",
                category=Category.CAKE,
                batches=(Batch("b", date(2025, 1, 1), 1),),
            )
        )

        assert notifier.listener_count == 1
        assert len(received) == 2
