import threading

import pytest

from safehouse.cancellation import CancellationToken, ensure_token
from safehouse.errors import (
    ConstraintViolation,
    InvalidArgument,
    NotFound,
    OperationCancelled,
    RepositoryError,
    UnsupportedRecordKind,
)


def test_token_starts_uncancelled():
    token = CancellationToken()
    assert not token.is_cancelled
    token.raise_if_cancelled()


def test_pre_cancelled_token_raises():
    token = CancellationToken(cancelled=True)
    with pytest.raises(OperationCancelled):
        token.raise_if_cancelled()


def test_cancel_from_another_thread_is_observed():
    token = CancellationToken()
    worker = threading.Thread(target=token.cancel)
    worker.start()
    worker.join()
    assert token.is_cancelled


def test_ensure_token_defaults_to_never_cancelled():
    assert not ensure_token(None).is_cancelled
    token = CancellationToken()
    assert ensure_token(token) is token


@pytest.mark.parametrize(
    "error_type",
    [InvalidArgument, NotFound, ConstraintViolation, OperationCancelled],
)
def test_errors_share_a_base(error_type):
    assert issubclass(error_type, RepositoryError)


def test_unsupported_record_kind_is_an_invalid_argument():
    err = UnsupportedRecordKind(dict)
    assert isinstance(err, InvalidArgument)
    assert isinstance(err, ValueError)
    assert "dict" in str(err)


def test_not_found_is_a_lookup_error():
    assert issubclass(NotFound, LookupError)
