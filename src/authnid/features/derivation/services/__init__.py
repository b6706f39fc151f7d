"""Derivation services: bypass evaluation, input collection, digest and orchestration."""

from .bypass_evaluator import BypassEvaluator, source_exists_in_another
from .input_collector import InputCollector, collect_single_value
from .digest import DIGEST_ALGORITHM, compute_authn_id, salt_input
from .connector import AuthnIdDataConnector, create_authn_id_connector

__all__ = [
    "BypassEvaluator",
    "source_exists_in_another",
    "InputCollector",
    "collect_single_value",
    "DIGEST_ALGORITHM",
    "compute_authn_id",
    "salt_input",
    "AuthnIdDataConnector",
    "create_authn_id_connector",
]
