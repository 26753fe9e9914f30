"""Session-scoped workspace holding one manager per dashboard page."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import streamlit as st

from .inventory import SAMPLE_INVENTORY, InventoryManager
from .notifications import Notifier
from .procurement import SAMPLE_ORDERS, Clock, OrderManager, supplier_choices
from .recipes import SAMPLE_RECIPES, RecipeManager
from .settings import SEED_DEMO_DATA
from .store import IdFactory, new_id
from .suppliers import SAMPLE_SUPPLIERS, SupplierManager
from .utils import iso_today

logger = logging.getLogger(__name__)

WORKSPACE_SESSION_KEY = "hospitality_workspace"


@dataclass
class Workspace:
    inventory: InventoryManager
    orders: OrderManager
    recipes: RecipeManager
    suppliers: SupplierManager
    notifier: Notifier

    def supplier_names(self) -> list[str]:
        return supplier_choices(self.suppliers.records)


def build_workspace(
    *,
    seed: bool = SEED_DEMO_DATA,
    id_factory: IdFactory = new_id,
    today: Clock = iso_today,
    notifier: Optional[Notifier] = None,
) -> Workspace:
    """Create fresh managers sharing one notifier, optionally seeded with sample records."""

    notifier = notifier if notifier is not None else Notifier()
    workspace = Workspace(
        inventory=InventoryManager(SAMPLE_INVENTORY if seed else (), id_factory=id_factory, notifier=notifier),
        orders=OrderManager(SAMPLE_ORDERS if seed else (), id_factory=id_factory, notifier=notifier, today=today),
        recipes=RecipeManager(SAMPLE_RECIPES if seed else (), id_factory=id_factory, notifier=notifier),
        suppliers=SupplierManager(SAMPLE_SUPPLIERS if seed else (), id_factory=id_factory, notifier=notifier),
        notifier=notifier,
    )
    logger.debug("Built workspace (seeded=%s)", seed)
    return workspace


def get_workspace() -> Workspace:
    """Return this browser session's workspace, creating it on first use."""

    if WORKSPACE_SESSION_KEY not in st.session_state:
        st.session_state[WORKSPACE_SESSION_KEY] = build_workspace()
    return st.session_state[WORKSPACE_SESSION_KEY]


def reset_workspace() -> Workspace:
    st.session_state.pop(WORKSPACE_SESSION_KEY, None)
    return get_workspace()


def get_metrics(workspace: Workspace) -> Dict[str, str]:
    """Return key dashboard metrics derived from the workspace."""

    order_stats = workspace.orders.stats()
    return {
        "total_items": f"{len(workspace.inventory):,}",
        "low_stock_items": f"{len(workspace.inventory.needing_attention()):,}",
        "pending_orders": f"{order_stats['pending']:,}",
        "urgent_orders": f"{order_stats['urgent_pending']:,}",
        "recipes": f"{len(workspace.recipes):,}",
        "suppliers": f"{len(workspace.suppliers):,}",
    }


__all__ = [
    "WORKSPACE_SESSION_KEY",
    "Workspace",
    "build_workspace",
    "get_metrics",
    "get_workspace",
    "reset_workspace",
]
