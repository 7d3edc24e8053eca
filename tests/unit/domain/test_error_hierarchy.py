from currencli.domain.errors import (
    ConfigurationError,
    ConversionUnavailableError,
    CurrencliError,
    DomainError,
    InvalidCredentialError,
    PersistenceError,
    TransportError,
    ValidationError,
)


def test_all_errors_share_base():
    for cls in (
        DomainError,
        ValidationError,
        ConfigurationError,
        InvalidCredentialError,
        PersistenceError,
        TransportError,
    ):
        assert issubclass(cls, CurrencliError)
    assert issubclass(ConversionUnavailableError, DomainError)
    assert issubclass(ValidationError, DomainError)


def test_messages_are_preserved():
    assert str(TransportError("boom")) == "boom"
    assert str(ConversionUnavailableError("USD", "XXX")) == "Unable to convert from USD to XXX"
