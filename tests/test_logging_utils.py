import logging

import numpy as np

from decision_mapper.logging_utils import _safe_repr, apply_debug_logging, debug_log_call
from decision_mapper.model import Dimension, Option


def test_debug_log_call_logs_entry_and_exit(caplog):
    logger = logging.getLogger("decision_mapper.tests.trace")

    @debug_log_call(logger)
    def add(a, b=1):
        return a + b

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        assert add(2, b=3) == 5

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "args=[2]" in message and "b=3" in message for message in messages)
    assert any(message.endswith("-> 5") for message in messages)


def test_debug_log_call_does_not_double_wrap():
    logger = logging.getLogger("decision_mapper.tests.trace")
    wrapped = debug_log_call(logger)(lambda: None)
    assert debug_log_call(logger)(wrapped) is wrapped


def test_apply_debug_logging_wraps_public_module_functions():
    def public():
        return 1

    def _private():
        return 2

    public.__module__ = "fake_module"
    _private.__module__ = "fake_module"
    namespace = {"__name__": "fake_module", "public": public, "_private": _private, "len": len}

    apply_debug_logging(namespace)

    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private
    assert namespace["len"] is len


def test_safe_repr_summarizes_records_and_arrays():
    dim = Dimension("d1", "Money")
    assert _safe_repr(dim) == "Dimension(d1, 'Money')"
    assert _safe_repr(Option("o1")) == "Option(o1)"
    assert _safe_repr(np.array([0.25, 0.75])) == "ndarray(shape=(2,), min=0.25, max=0.75)"
    assert _safe_repr(list(range(7))) == "[0, 1, 2, 3, 4, ... (7 total)]"
