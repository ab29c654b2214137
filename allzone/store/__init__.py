"""Flat-file stores backing the site."""

from allzone.store.bootstrap import ensure_data_dir
from allzone.store.contacts import ContactStore
from allzone.store.properties import PropertyStore

__all__ = ["ContactStore", "PropertyStore", "ensure_data_dir"]
