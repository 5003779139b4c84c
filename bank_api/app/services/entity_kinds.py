"""
Descriptors of the master data kinds served by the API.

An ``EntityKind`` binds a pydantic model to its table, its identifier
and ticket columns and the accessor that produces the text shown in
lookup lists.  The record store, the resource controller and the
router factory are all driven by these descriptors, so adding a kind
means adding a model, a migration and one entry in ``ENTITY_KINDS``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from bank_api.app.schemas.account import Account
from bank_api.app.schemas.branch import Branch
from bank_api.app.schemas.common import RecordModel
from bank_api.app.schemas.customer import Customer
from bank_api.app.schemas.employee import Employee


@dataclass(frozen=True)
class EntityKind:
    """Static description of one kind of record."""

    name: str
    plural: str
    table: str
    model: Type[RecordModel]
    id_field: str
    ticket_field: str
    display: Callable[[Any], str]

    @property
    def columns(self) -> List[str]:
        """Persisted columns; computed fields such as ``DisplayName`` are excluded."""
        return list(self.model.model_fields)

    def get_id(self, entity: RecordModel) -> Optional[int]:
        return getattr(entity, self.id_field)

    def display_text(self, entity: RecordModel) -> str:
        return self.display(entity)

    def to_row(self, entity: RecordModel) -> Dict[str, Any]:
        """Column values of ``entity`` in a form SQLite can bind."""
        data = entity.model_dump(mode="json")
        return {column: data[column] for column in self.columns}

    def from_row(self, row: Any) -> RecordModel:
        return self.model.model_validate(dict(row))


ACCOUNT = EntityKind(
    name="Account",
    plural="Accounts",
    table="accounts",
    model=Account,
    id_field="account_id",
    ticket_field="account_ticket",
    display=lambda account: str(account.account_ticket),
)

BRANCH = EntityKind(
    name="Branch",
    plural="Branches",
    table="branches",
    model=Branch,
    id_field="branch_id",
    ticket_field="branch_ticket",
    display=lambda branch: branch.name,
)

CUSTOMER = EntityKind(
    name="Customer",
    plural="Customers",
    table="customers",
    model=Customer,
    id_field="customer_id",
    ticket_field="customer_ticket",
    display=lambda customer: customer.name,
)

EMPLOYEE = EntityKind(
    name="Employee",
    plural="Employees",
    table="employees",
    model=Employee,
    id_field="employee_id",
    ticket_field="employee_ticket",
    display=lambda employee: employee.display_name,
)

# Order of the tables in the /indexdata response.
ENTITY_KINDS: Tuple[EntityKind, ...] = (ACCOUNT, BRANCH, CUSTOMER, EMPLOYEE)

