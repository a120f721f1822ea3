import pytest

from agro_registry.application.dtos.producer_dto import CreateProducerDTO, UpdateProducerDTO
from agro_registry.domain.errors import ConflictError, NotFoundError, ValidationError
from agro_registry.domain.value_objects.document import DocumentType
from agro_registry.presentation.container import build_services
from tests.unit._fakes_store import SpyStore


def _setup():
    store = SpyStore()
    return store, build_services(store).producers


def test_create_normalizes_document():
    store, service = _setup()
    producer = service.create(CreateProducerDTO("João Silva", "123.456.789-01", DocumentType.CPF))
    assert producer.document == "12345678901"
    assert store.producers.mutations == [
        ("create", {"name": "João Silva", "document": "12345678901", "document_type": DocumentType.CPF})
    ]


def test_create_conflicts_with_normalized_duplicate():
    store, service = _setup()
    service.create(CreateProducerDTO("João Silva", "123.456.789-01", DocumentType.CPF))
    store.reset()
    with pytest.raises(ConflictError) as err:
        service.create(CreateProducerDTO("Outro", "12345678901", DocumentType.CPF))
    assert err.value.details == {"field": "document"}
    assert store.mutations == []


def test_get_returns_nested_view():
    _, service = _setup()
    producer = service.create(CreateProducerDTO("Maria", "98765432100", DocumentType.CPF))
    view = service.get(producer.id)
    assert view.producer == producer
    assert view.farms == ()


def test_get_missing_raises_not_found():
    _, service = _setup()
    with pytest.raises(NotFoundError):
        service.get("missing")


def test_list_newest_first():
    _, service = _setup()
    first = service.create(CreateProducerDTO("A", "111", DocumentType.CPF))
    second = service.create(CreateProducerDTO("B", "222", DocumentType.CPF))
    assert [v.producer.id for v in service.list()] == [second.id, first.id]


def test_update_to_own_document_succeeds():
    _, service = _setup()
    producer = service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    updated = service.update(producer.id, UpdateProducerDTO(name="João Atualizado", document="123.456.789-01"))
    assert updated.document == "12345678901"
    assert updated.name == "João Atualizado"


def test_update_to_taken_document_conflicts():
    store, service = _setup()
    service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    other = service.create(CreateProducerDTO("Maria", "98765432100", DocumentType.CPF))
    store.reset()
    with pytest.raises(ConflictError):
        service.update(other.id, UpdateProducerDTO(document="123.456.789-01"))
    assert store.mutations == []
    assert service.get(other.id).producer.document == "98765432100"


def test_update_without_document_skips_uniqueness():
    store, service = _setup()
    producer = service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    updated = service.update(producer.id, UpdateProducerDTO(document_type=DocumentType.CNPJ))
    assert updated.document_type is DocumentType.CNPJ
    assert store.producers.mutations[-1] == ("update", producer.id, {"document_type": DocumentType.CNPJ})


def test_update_missing_fails_before_anything_else():
    store, service = _setup()
    service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    store.reset()
    # the document would conflict too, but self-existence is checked first
    with pytest.raises(NotFoundError):
        service.update("missing", UpdateProducerDTO(document="12345678901"))
    assert store.mutations == []


def test_delete_missing_raises_not_found():
    store, service = _setup()
    with pytest.raises(NotFoundError):
        service.delete("missing")
    assert store.mutations == []


def test_delete_removes_producer():
    _, service = _setup()
    producer = service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    service.delete(producer.id)
    with pytest.raises(NotFoundError):
        service.get(producer.id)
    # the document is free again
    service.create(CreateProducerDTO("João de novo", "12345678901", DocumentType.CPF))


class _BlindUniqueness:
    """Stands in for a guard that lost a race with a concurrent request."""
    def check_available(self, document):
        pass
    def check_available_excluding(self, document, current_id):
        pass


def test_store_duplicate_maps_to_conflict():
    from agro_registry.application.services.producer_service import ProducerService

    store = SpyStore()
    service = ProducerService(store, uniqueness=_BlindUniqueness())
    service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    with pytest.raises(ConflictError):
        service.create(CreateProducerDTO("Outro", "123.456.789-01", DocumentType.CPF))
    assert len(store.producers.list()) == 1


def test_store_duplicate_on_update_maps_to_conflict():
    from agro_registry.application.services.producer_service import ProducerService

    store = SpyStore()
    service = ProducerService(store, uniqueness=_BlindUniqueness())
    service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    other = service.create(CreateProducerDTO("Outro", "98765432100", DocumentType.CPF))
    with pytest.raises(ConflictError):
        service.update(other.id, UpdateProducerDTO(document="123.456.789-01"))
    assert store.producers.get(other.id).document == "98765432100"


def test_document_without_digits_is_rejected():
    store, service = _setup()
    with pytest.raises(ValidationError) as exc:
        service.create(CreateProducerDTO("Sem documento", "---", DocumentType.CPF))
    assert exc.value.details == {"field": "document"}
    producer = service.create(CreateProducerDTO("João", "12345678901", DocumentType.CPF))
    store.reset()
    with pytest.raises(ValidationError):
        service.update(producer.id, UpdateProducerDTO(document="./-"))
    assert store.mutations == []
