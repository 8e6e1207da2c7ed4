"""
Unit tests for DeckFacade.

The store is an AsyncMock built from the DeckStore protocol, so every test
controls exactly what the store reports.
"""

from unittest.mock import AsyncMock

import pytest
import schemas
from domain.repositories import DeckStore
from services.facades import DeckFacade


@pytest.fixture
def mock_deck_store():
    return AsyncMock(spec=DeckStore)


@pytest.fixture
def deck_facade(mock_deck_store, mock_logger):
    return DeckFacade(mock_deck_store, mock_logger)


def make_decks(count, creation_date, folder_id=None):
    return [
        schemas.Deck(
            id=i,
            name=f"TestDeck{i}",
            description=f"Dummy deck{i}",
            created_at=creation_date,
            folder_id=folder_id,
        )
        for i in range(1, count + 1)
    ]


class TestDeckListAll:
    async def test_list_all_no_decks_found(self, deck_facade, mock_deck_store, mock_logger):
        """An absent collection from the store is a 404."""
        mock_deck_store.get_all.return_value = None

        result = await deck_facade.list_all()

        assert result.status_code == 404
        assert result.content == "Deck list not found"
        mock_logger.warning.assert_called_once()

    async def test_list_all_ok(self, deck_facade, mock_deck_store, creation_date):
        """Decks come back in store order with every field intact."""
        decks = make_decks(3, creation_date)
        mock_deck_store.get_all.return_value = decks

        result = await deck_facade.list_all()

        assert result.status_code == 200
        assert len(result.content) == 3
        for expected, actual in zip(decks, result.content):
            assert actual.id == expected.id
            assert actual.name == expected.name
            assert actual.description == expected.description
            assert actual.created_at == expected.created_at

    async def test_list_all_empty_is_ok(self, deck_facade, mock_deck_store):
        mock_deck_store.get_all.return_value = []

        result = await deck_facade.list_all()

        assert result.status_code == 200
        assert result.content == []


class TestDeckListByFolder:
    async def test_list_by_folder_not_found(self, deck_facade, mock_deck_store):
        """An absent collection for a folder is a 400, not a 404."""
        mock_deck_store.get_decks_by_folder_id.return_value = None

        result = await deck_facade.list_by_folder(1)

        assert result.status_code == 400
        assert result.content == "Deck list not found"
        mock_deck_store.get_decks_by_folder_id.assert_awaited_once_with(1)

    async def test_list_by_folder_ok(self, deck_facade, mock_deck_store, creation_date):
        decks = make_decks(4, creation_date, folder_id=1)
        mock_deck_store.get_decks_by_folder_id.return_value = decks

        result = await deck_facade.list_by_folder(1)

        assert result.status_code == 200
        assert len(result.content) == 4
        for i, deck in enumerate(result.content, start=1):
            assert deck.id == i
            assert deck.name == f"TestDeck{i}"
            assert deck.description == f"Dummy deck{i}"
            assert deck.folder_id == 1


class TestDeckCreate:
    async def test_create_invalid_deck(self, deck_facade, mock_deck_store):
        result = await deck_facade.create(None)

        assert result.status_code == 400
        assert result.content == "Invalid Deck data"
        mock_deck_store.create.assert_not_called()

    async def test_create_ok(self, deck_facade, mock_deck_store):
        deck = schemas.DeckCreate(name="TestDeck1", description="Dummy deck1")
        mock_deck_store.create.return_value = True

        result = await deck_facade.create(deck)

        assert result.status_code == 200
        assert result.content == schemas.OperationResult(success=True, message="Deck created successfully")
        mock_deck_store.create.assert_awaited_once_with(deck)

    async def test_create_not_ok(self, deck_facade, mock_deck_store, mock_logger):
        """Store failure on create still answers 200, with success=False."""
        deck = schemas.DeckCreate(name="TestDeck1", description="Dummy deck1")
        mock_deck_store.create.return_value = False

        result = await deck_facade.create(deck)

        assert result.status_code == 200
        assert result.content.success is False
        assert result.content.message == "Deck creation failed"
        mock_logger.warning.assert_called_once()


class TestDeckCreateInFolder:
    async def test_create_in_folder_invalid_deck(self, deck_facade, mock_deck_store):
        result = await deck_facade.create_in_folder(7, None)

        assert result.status_code == 400
        assert result.content == "Invalid Deck data"
        mock_deck_store.create.assert_not_called()

    async def test_create_in_folder_ok(self, deck_facade, mock_deck_store):
        """The folder id is set on the deck handed to the store."""
        deck = schemas.DeckCreate(name="TestDeck1", description="Dummy deck1")
        mock_deck_store.create.return_value = True

        result = await deck_facade.create_in_folder(1, deck)

        assert result.status_code == 200
        assert result.content == schemas.OperationResult(success=True, message="Deck created successfully")
        stored = mock_deck_store.create.await_args.args[0]
        assert stored.folder_id == 1
        assert stored.name == "TestDeck1"
        # The caller's object is left untouched
        assert deck.folder_id is None

    async def test_create_in_folder_not_ok(self, deck_facade, mock_deck_store):
        deck = schemas.DeckCreate(name="TestDeck1", description="Dummy deck1")
        mock_deck_store.create.return_value = False

        result = await deck_facade.create_in_folder(1, deck)

        assert result.status_code == 200
        assert result.content == schemas.OperationResult(success=False, message="Deck creation failed")


class TestDeckGetById:
    async def test_get_by_id_not_found(self, deck_facade, mock_deck_store):
        mock_deck_store.get_deck_by_id.return_value = None

        result = await deck_facade.get_by_id(1)

        assert result.status_code == 404
        assert result.content == "Deck not found"

    async def test_get_by_id_ok(self, deck_facade, mock_deck_store, creation_date):
        deck = make_decks(1, creation_date)[0]
        mock_deck_store.get_deck_by_id.return_value = deck

        result = await deck_facade.get_by_id(1)

        assert result.status_code == 200
        assert result.content == deck
        mock_deck_store.get_deck_by_id.assert_awaited_once_with(1)


class TestDeckUpdate:
    async def test_update_invalid_deck(self, deck_facade, mock_deck_store):
        result = await deck_facade.update(None)

        assert result.status_code == 400
        assert result.content == "Invalid Deck data"
        mock_deck_store.update.assert_not_called()

    async def test_update_ok(self, deck_facade, mock_deck_store):
        deck = schemas.DeckUpdate(id=1, name="TestDeck1", description="Dummy deck1")
        mock_deck_store.update.return_value = True

        result = await deck_facade.update(deck)

        assert result.status_code == 200
        assert result.content == schemas.OperationResult(success=True, message="Deck #1 updated successfully")
        mock_deck_store.update.assert_awaited_once_with(deck)

    async def test_update_not_ok(self, deck_facade, mock_deck_store):
        deck = schemas.DeckUpdate(id=1, name="TestDeck1", description="Dummy deck1")
        mock_deck_store.update.return_value = False

        result = await deck_facade.update(deck)

        assert result.status_code == 200
        assert result.content == schemas.OperationResult(success=False, message="Deck update failed")


class TestDeckDelete:
    async def test_delete_not_ok(self, deck_facade, mock_deck_store):
        """Store failure on delete is a 400 with a plain message."""
        mock_deck_store.delete.return_value = False

        result = await deck_facade.delete(1)

        assert result.status_code == 400
        assert result.content == "Deck deletion failed"

    async def test_delete_ok(self, deck_facade, mock_deck_store):
        mock_deck_store.delete.return_value = True

        result = await deck_facade.delete(1)

        assert result.status_code == 200
        assert result.content == schemas.OperationResult(success=True, message="Deck #1 deleted successfully")
        mock_deck_store.delete.assert_awaited_once_with(1)
