"""Operation catalogue: every request kind the pipeline can build."""

from logistics.content.rules import Operation
from logistics.operations.cvs import CANCEL_CVS_ORDER, CREATE_CVS_ORDER, RETURN_CVS_ORDER, UPDATE_CVS_ORDER
from logistics.operations.home import CREATE_HOME_ORDER, RETURN_HOME_ORDER
from logistics.operations.map import OPEN_STORE_MAP
from logistics.operations.printing import PRINT_CVS_DOCUMENT, PRINT_TRADE_DOCUMENT
from logistics.operations.queries import GET_STORE_LIST, QUERY_LOGISTICS_ORDER

OPERATIONS: dict[str, Operation] = {
    operation.name: operation
    for operation in (
        CREATE_CVS_ORDER,
        CANCEL_CVS_ORDER,
        RETURN_CVS_ORDER,
        UPDATE_CVS_ORDER,
        CREATE_HOME_ORDER,
        RETURN_HOME_ORDER,
        OPEN_STORE_MAP,
        PRINT_CVS_DOCUMENT,
        PRINT_TRADE_DOCUMENT,
        GET_STORE_LIST,
        QUERY_LOGISTICS_ORDER,
    )
}


def get_operation(name: str) -> Operation:
    """Return the operation registered under ``name``."""
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown logistics operation: {name}") from None
