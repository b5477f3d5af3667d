# rocketcart/services/cart_engine.py
import threading
from typing import Callable, List

from rocketcart.domain import snapshot
from rocketcart.domain.cart_rules import (
    MutationOutcome,
    Plan,
    plan_add,
    plan_remove,
    plan_set_amount,
)
from rocketcart.domain.schemas import Cart
from rocketcart.repos.snapshot_repo import SnapshotStore
from rocketcart.services.notification_service import NotificationService
from rocketcart.services.stock_client import StockClient
from rocketcart.utils.settings import CART_STORAGE_KEY
from rocketcart.utils.logging import get_logger

logger = get_logger(__name__)

STOCK_LIMIT_MESSAGE = "Zadana ilosc produktu przekracza stan magazynowy"
ADD_ERROR_MESSAGE = "Blad podczas dodawania produktu"
REMOVE_ERROR_MESSAGE = "Blad podczas usuwania produktu"
UPDATE_ERROR_MESSAGE = "Blad podczas zmiany ilosci produktu"

Listener = Callable[[Cart], None]


class CartEngine:
    """
    Wlasciciel stanu koszyka.

    -add / remove / update sprawdzaja stock i zapisuja caly snapshot
    -kazda operacja buduje kopie robocza z ostatniego zatwierdzonego koszyka
    -commit = zapis snapshotu + podmiana koszyka + powiadomienie subskrybentow
    -przy bledzie stan bez zmian i komunikat do NotificationService
    """

    def __init__(
        self,
        stock_client: StockClient,
        store: SnapshotStore,
        notifier: NotificationService,
        storage_key: str | None = None,
    ):
        self.stock_client = stock_client
        self.store = store
        self.notifier = notifier
        self.storage_key = storage_key or CART_STORAGE_KEY

        # jeden read-modify-write naraz na instancje
        self._lock = threading.Lock()
        # publikacja w kolejnosci commitow, RLock bo subskrybent moze wolac silnik
        self._publish_lock = threading.RLock()
        self._version = 0
        self._published_version = 0
        self._listeners: List[Listener] = []
        self._cart: Cart = self._restore()

    #query
    @property
    def cart(self) -> Cart:
        return self._cart

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    #commands
    def add_product(self, product_id: int) -> None:
        def plan(cart: Cart) -> Plan:
            stock = self.stock_client.get_stock(product_id)
            return plan_add(cart, product_id, stock.amount, self.stock_client.get_product)

        self._mutate(f"add product {product_id}", plan, ADD_ERROR_MESSAGE)

    def remove_product(self, product_id: int) -> None:
        self._mutate(
            f"remove product {product_id}",
            lambda cart: plan_remove(cart, product_id),
            REMOVE_ERROR_MESSAGE,
        )

    def update_product_amount(self, product_id: int, amount: int) -> None:
        def plan(cart: Cart) -> Plan:
            # zejscie ponizej 1 z UI, nie pytamy nawet o stock
            if amount <= 0:
                return Plan(MutationOutcome.IGNORED)
            stock = self.stock_client.get_stock(product_id)
            return plan_set_amount(cart, product_id, amount, stock.amount)

        self._mutate(f"set product {product_id} amount to {amount}", plan, UPDATE_ERROR_MESSAGE)

    def _mutate(
        self,
        action: str,
        plan: Callable[[Cart], Plan],
        failure_message: str,
    ) -> MutationOutcome:
        version = 0
        with self._lock:
            try:
                outcome, next_cart = plan(self._cart)
                if outcome is MutationOutcome.COMMITTED:
                    self._commit(next_cart)
                    self._version += 1
                    version = self._version
            except Exception as e:
                logger.error(f"Blad podczas operacji '{action}': {e}")
                outcome = MutationOutcome.INFRASTRUCTURE_FAILURE

        if outcome is MutationOutcome.COMMITTED:
            logger.info(f"Koszyk zatwierdzony po '{action}', pozycji: {len(next_cart)}")
            self._publish(version, next_cart)
        elif outcome is MutationOutcome.IGNORED:
            logger.info(f"Pominieto '{action}'")
        elif outcome is MutationOutcome.REJECTED_STOCK:
            logger.warning(f"Odrzucono '{action}': brak stanu magazynowego")
            self.notifier.error(STOCK_LIMIT_MESSAGE)
        else:
            if outcome is MutationOutcome.REJECTED_NOT_FOUND:
                logger.warning(f"Odrzucono '{action}': produktu nie ma w koszyku")
            self.notifier.error(failure_message)

        return outcome

    def _commit(self, next_cart: Cart) -> None:
        # najpierw zapis, podmiana dopiero gdy store przyjal snapshot
        self.store.set(self.storage_key, snapshot.dumps(next_cart))
        self._cart = next_cart

    def _publish(self, version: int, cart: Cart) -> None:
        with self._publish_lock:
            # nowszy commit juz opublikowany
            if version <= self._published_version:
                return
            self._published_version = version

            for listener in list(self._listeners):
                try:
                    listener(cart)
                except Exception as e:
                    logger.error(f"Subskrybent koszyka rzucil wyjatek: {e}")
                # subskrybent zatwierdzil nowszy koszyk i juz go rozeslal
                if self._published_version != version:
                    return

    def _restore(self) -> Cart:
        try:
            blob = self.store.get(self.storage_key)
        except Exception as e:
            logger.error(f"Nie udalo sie odczytac snapshotu {self.storage_key}: {e}")
            return ()

        if blob is None:
            logger.info(f"Brak snapshotu {self.storage_key}, pusty koszyk")
            return ()

        try:
            cart = snapshot.loads(blob)
        except ValueError as e:
            logger.warning(f"Uszkodzony snapshot {self.storage_key}, pusty koszyk: {e}")
            return ()

        logger.info(f"Odtworzono koszyk z {len(cart)} pozycjami")
        return cart
