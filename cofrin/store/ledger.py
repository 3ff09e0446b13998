"""In-memory ledger wiring the finance calculations into app workflows."""

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal

from cofrin.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
    ReferentialIntegrityError,
    ValidationError,
)
from cofrin.finance.aggregation import compute_balance, compute_category_totals
from cofrin.finance.cpf import is_valid as is_valid_cpf
from cofrin.finance.cpf import strip_cpf
from cofrin.finance.goals import apply_contribution, partition_goals
from cofrin.finance.installments import build_installment_transactions, split_installments
from cofrin.finance.parsing import is_email_identifier, to_decimal
from cofrin.finance.validation import validate_account_name, validate_credit_card
from cofrin.models import (
    DEFAULT_ACCOUNT_NAME,
    Account,
    CategoryTotal,
    ContributionResult,
    CreditCard,
    Goal,
    Transaction,
    TransactionType,
    User,
)

logger = logging.getLogger(__name__)

GOAL_CONTRIBUTION_CATEGORY = "Outros"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class LedgerStore:
    """In-memory store for one or more owners' finance records."""

    # Primary entities
    users: dict[str, User] = field(default_factory=dict)
    accounts: dict[str, Account] = field(default_factory=dict)
    credit_cards: dict[str, CreditCard] = field(default_factory=dict)
    transactions: dict[str, Transaction] = field(default_factory=dict)
    goals: dict[str, Goal] = field(default_factory=dict)

    id_factory: Callable[[], str] = _new_id

    # Relationship indexes
    _users_by_cpf: dict[str, str] = field(default_factory=dict)
    _owner_accounts: dict[str, list[str]] = field(default_factory=dict)
    _owner_cards: dict[str, list[str]] = field(default_factory=dict)
    _owner_transactions: dict[str, list[str]] = field(default_factory=dict)
    _owner_goals: dict[str, list[str]] = field(default_factory=dict)

    # Users
    def add_user(self, user: User) -> None:
        """Add a user; the id and the CPF must not be registered yet."""
        if user.user_id in self.users:
            raise DuplicateEntityError(f"User {user.user_id} already exists")
        if not is_valid_cpf(user.cpf):
            raise ValidationError("Invalid CPF")
        cpf = strip_cpf(user.cpf)
        if cpf in self._users_by_cpf:
            raise DuplicateEntityError(f"CPF {cpf} is already registered")

        self.users[user.user_id] = user
        self._users_by_cpf[cpf] = user.user_id
        self._owner_accounts[user.user_id] = []
        self._owner_cards[user.user_id] = []
        self._owner_transactions[user.user_id] = []
        self._owner_goals[user.user_id] = []

    def resolve_login_email(self, identifier: str) -> str:
        """Map a login identifier (email or CPF) to the email to sign in with."""
        if is_email_identifier(identifier):
            return identifier
        user_id = self._users_by_cpf.get(strip_cpf(identifier))
        if user_id is None:
            raise EntityNotFoundError(f"CPF {identifier} not found")
        return self.users[user_id].email

    def _require_owner(self, owner_id: str) -> None:
        if owner_id not in self.users:
            raise ReferentialIntegrityError(f"User {owner_id} not found")

    # Accounts and cards
    def add_account(self, owner_id: str, name: str) -> Account:
        """Create a named account for an owner."""
        self._require_owner(owner_id)
        cleaned = validate_account_name(name, self._booking_names(owner_id))

        account = Account(
            account_id=self.id_factory(),
            owner_id=owner_id,
            name=cleaned,
            created_at=datetime.now(),
        )
        self.accounts[account.account_id] = account
        self._owner_accounts[owner_id].append(account.account_id)
        return account

    def account_names(self, owner_id: str) -> list[str]:
        """Account names of an owner, the implicit default first."""
        names = [self.accounts[aid].name for aid in self._owner_accounts.get(owner_id, [])]
        return [DEFAULT_ACCOUNT_NAME, *names]

    def _booking_names(self, owner_id: str, exclude_card_id: str | None = None) -> list[str]:
        # Accounts and cards share one namespace: transactions are booked by name.
        cards = [card.name for card in self.get_owner_cards(owner_id) if card.card_id != exclude_card_id]
        return self.account_names(owner_id) + cards

    def _checked_card_fields(
        self,
        owner_id: str,
        name: str,
        due_day: int | str,
        limit: Decimal | str | None,
        exclude_card_id: str | None = None,
    ) -> tuple[str, int, Decimal]:
        name, day, card_limit = validate_credit_card(name, due_day, None if limit is None else str(limit))
        if name in self._booking_names(owner_id, exclude_card_id):
            raise DuplicateEntityError(f"Name {name!r} is already used by an account or card")
        return name, day, card_limit

    def add_credit_card(self, card: CreditCard) -> None:
        """Add a credit card to the store.

        Name, due day and limit are normalised in place; the name must not
        clash with another card or account of the owner.
        """
        self._require_owner(card.owner_id)
        if card.card_id in self.credit_cards:
            raise DuplicateEntityError(f"Credit card {card.card_id} already exists")
        card.name, card.due_day, card.limit = self._checked_card_fields(
            card.owner_id, card.name, card.due_day, card.limit
        )
        if card.created_at is None:
            card.created_at = datetime.now()
        self.credit_cards[card.card_id] = card
        self._owner_cards[card.owner_id].append(card.card_id)

    def update_credit_card(
        self,
        card_id: str,
        name: str,
        due_day: int | str,
        limit: Decimal | str | None,
    ) -> CreditCard:
        """Edit a card's name, due day and limit.

        A renamed card keeps its transactions: they are re-booked under the
        new name.
        """
        card = self._get_card(card_id)
        new_name, day, card_limit = self._checked_card_fields(
            card.owner_id, name, due_day, limit, exclude_card_id=card_id
        )

        if new_name != card.name:
            for transaction in self.get_owner_transactions(card.owner_id, card.name):
                self.transactions[transaction.transaction_id] = replace(
                    transaction,
                    account_name=new_name,
                    credit_card_name=new_name if transaction.credit_card_name else None,
                )
            logger.info(
                "Renamed card %s to %s",
                card.name,
                new_name,
                extra={"owner_id": card.owner_id, "card": new_name},
            )

        updated = replace(card, name=new_name, due_day=day, limit=card_limit)
        self.credit_cards[card_id] = updated
        return updated

    def delete_credit_card(self, card_id: str) -> CreditCard:
        """Remove a card that has no transactions booked on it.

        Raises
        ------
        ReferentialIntegrityError
            If transactions (installments included) still reference the card.
        """
        card = self._get_card(card_id)
        booked = self.get_owner_transactions(card.owner_id, card.name)
        if booked:
            raise ReferentialIntegrityError(
                f"Credit card {card.name!r} still has {len(booked)} transactions"
            )
        del self.credit_cards[card_id]
        self._owner_cards[card.owner_id].remove(card_id)
        return card

    def get_owner_cards(self, owner_id: str) -> list[CreditCard]:
        """Get all credit cards for an owner."""
        return [self.credit_cards[cid] for cid in self._owner_cards.get(owner_id, [])]

    def _get_card(self, card_id: str) -> CreditCard:
        card = self.credit_cards.get(card_id)
        if card is None:
            raise EntityNotFoundError(f"Credit card {card_id} not found")
        return card

    def _find_card(self, owner_id: str, card_name: str) -> CreditCard:
        for card in self.get_owner_cards(owner_id):
            if card.name == card_name:
                return card
        raise ReferentialIntegrityError(f"Credit card {card_name!r} not found")

    # Transactions
    def add_transaction(self, transaction: Transaction) -> None:
        """Add a transaction booked on a known account or card."""
        self._require_owner(transaction.owner_id)
        if transaction.amount < 0:
            raise InvalidArgumentError(f"Amount must not be negative, got {transaction.amount}")

        card_names = {card.name for card in self.get_owner_cards(transaction.owner_id)}
        if (
            transaction.account_name not in self.account_names(transaction.owner_id)
            and transaction.account_name not in card_names
        ):
            raise ReferentialIntegrityError(f"Account {transaction.account_name!r} not found")

        self.transactions[transaction.transaction_id] = transaction
        self._owner_transactions[transaction.owner_id].append(transaction.transaction_id)

    def delete_transaction(self, transaction_id: str) -> Transaction:
        """Remove a transaction and return it."""
        transaction = self.transactions.pop(transaction_id, None)
        if transaction is None:
            raise EntityNotFoundError(f"Transaction {transaction_id} not found")
        self._owner_transactions[transaction.owner_id].remove(transaction_id)
        return transaction

    def get_owner_transactions(
        self,
        owner_id: str,
        account_name: str | None = None,
    ) -> list[Transaction]:
        """Get an owner's transactions, optionally restricted to one account."""
        result = [self.transactions[tid] for tid in self._owner_transactions.get(owner_id, [])]
        if account_name is not None:
            result = [tx for tx in result if tx.account_name == account_name]
        return result

    def record_installment_purchase(
        self,
        owner_id: str,
        card_name: str,
        total_amount: Decimal,
        count: int,
        description: str,
        category: str,
        start_date: date | None = None,
    ) -> list[Transaction]:
        """Record a credit-card purchase as one transaction per installment.

        Returns
        -------
        list[Transaction]
            The sibling installment transactions, in due-date order.
        """
        self._require_owner(owner_id)
        card = self._find_card(owner_id, card_name)
        plan = split_installments(total_amount, count, start_date)

        siblings = build_installment_transactions(
            plan,
            owner_id=owner_id,
            description=description,
            category=category,
            credit_card_name=card.name,
            created_at=datetime.now(),
            id_factory=self.id_factory,
        )
        for transaction in siblings:
            self.add_transaction(transaction)

        logger.info(
            "Recorded %d installments of %s on card %s",
            count,
            plan[0].amount,
            card.name,
            extra={"owner_id": owner_id, "card": card.name},
        )
        return siblings

    # Goals
    def add_goal(self, goal: Goal) -> None:
        """Add a goal to the store."""
        self._require_owner(goal.owner_id)
        self.goals[goal.goal_id] = goal
        self._owner_goals[goal.owner_id].append(goal.goal_id)

    def contribute_to_goal(
        self,
        goal_id: str,
        amount: Decimal,
        from_balance: bool = False,
        now: datetime | None = None,
    ) -> ContributionResult:
        """Add money to a goal.

        With ``from_balance`` the money leaves the default account as an
        expense named after the goal. Completed goals take no more money.
        """
        goal = self._get_goal(goal_id)
        if goal.completed:
            raise InvalidArgumentError(f"Goal {goal.title!r} is already completed")

        result = apply_contribution(goal, amount, now)

        if from_balance:
            self.add_transaction(
                Transaction(
                    transaction_id=self.id_factory(),
                    owner_id=goal.owner_id,
                    transaction_type=TransactionType.EXPENSE,
                    amount=to_decimal(amount),
                    description=f"Meta: {goal.title}",
                    category=GOAL_CONTRIBUTION_CATEGORY,
                    account_name=DEFAULT_ACCOUNT_NAME,
                    created_at=now or datetime.now(),
                )
            )

        self.goals[goal_id] = result.goal
        if result.just_completed:
            logger.info(
                "Goal %r completed", goal.title, extra={"owner_id": goal.owner_id, "goal_id": goal_id}
            )
        return result

    def update_goal(
        self,
        goal_id: str,
        title: str,
        target: Decimal | str,
        now: datetime | None = None,
    ) -> Goal:
        """Edit a goal's title and target.

        A completed goal follows its new target so that ``current`` stays
        equal to it. An active goal whose saved amount already reaches the
        new target is completed.

        Raises
        ------
        ValidationError
            If the title is empty or the target is not a positive amount.
        """
        goal = self._get_goal(goal_id)
        cleaned = (title or "").strip()
        new_target = to_decimal(target)
        if not cleaned or new_target is None or new_target <= 0:
            raise ValidationError("Title and a positive target are required")

        updated = replace(goal, title=cleaned, target=new_target)
        if updated.completed:
            updated.current = new_target
        elif (to_decimal(updated.current) or Decimal("0")) >= new_target:
            updated.current = new_target
            updated.completed = True
            updated.completed_at = now or datetime.now()
            logger.info(
                "Goal %r completed", cleaned, extra={"owner_id": goal.owner_id, "goal_id": goal_id}
            )

        self.goals[goal_id] = updated
        return updated

    def _get_goal(self, goal_id: str) -> Goal:
        goal = self.goals.get(goal_id)
        if goal is None:
            raise EntityNotFoundError(f"Goal {goal_id} not found")
        return goal

    def get_owner_goals(self, owner_id: str) -> tuple[list[Goal], list[Goal]]:
        """Get an owner's goals as (active, completed)."""
        return partition_goals(self.goals[gid] for gid in self._owner_goals.get(owner_id, []))

    # Aggregates
    def balance(self, owner_id: str, account_name: str = DEFAULT_ACCOUNT_NAME) -> Decimal:
        """Net balance of one account."""
        return compute_balance(self.get_owner_transactions(owner_id, account_name))

    def category_totals(
        self,
        owner_id: str,
        account_name: str = DEFAULT_ACCOUNT_NAME,
    ) -> dict[str, CategoryTotal]:
        """Expense totals per category of one account."""
        return compute_category_totals(self.get_owner_transactions(owner_id, account_name))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "users": len(self.users),
            "accounts": len(self.accounts),
            "credit_cards": len(self.credit_cards),
            "transactions": len(self.transactions),
            "goals": len(self.goals),
        }
