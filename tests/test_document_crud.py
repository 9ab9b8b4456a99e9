"""
Tests for the document store adapter.
"""

from jobtracker.crud import document as document_crud


class TestCreate:
    """Tests for document creation"""

    def test_assigns_id_and_timestamps(self, db_session):
        doc_id = document_crud.create(db_session, "jobs", {"title": "engineer"})

        doc = document_crud.get_by_id(db_session, "jobs", doc_id)
        assert doc["id"] == doc_id
        assert doc["title"] == "engineer"
        assert "createdAt" in doc
        assert "updatedAt" in doc

    def test_keeps_client_supplied_timestamps(self, db_session):
        doc_id = document_crud.create(db_session, "jobs", {
            "title": "engineer",
            "createdAt": "2024-03-23T12:00:00Z",
            "updatedAt": "2024-03-23T12:30:00Z",
        })

        doc = document_crud.get_by_id(db_session, "jobs", doc_id)
        assert doc["createdAt"] == "2024-03-23T12:00:00Z"
        assert doc["updatedAt"] == "2024-03-23T12:30:00Z"

    def test_explicit_id(self, db_session):
        doc_id = document_crud.create(db_session, "jobs", {"title": "engineer"}, doc_id="job123")

        assert doc_id == "job123"
        assert document_crud.get_by_id(db_session, "jobs", "job123")["title"] == "engineer"

    def test_does_not_mutate_input(self, db_session):
        fields = {"title": "engineer"}

        document_crud.create(db_session, "jobs", fields)

        assert fields == {"title": "engineer"}


class TestRead:
    """Tests for document reads"""

    def test_missing_document(self, db_session):
        assert document_crud.get_by_id(db_session, "jobs", "nope") is None

    def test_collections_are_separate(self, db_session):
        document_crud.create(db_session, "jobs", {"title": "engineer"}, doc_id="same-id")
        document_crud.create(db_session, "notes", {"text": "call back"}, doc_id="same-id")

        assert document_crud.get_by_id(db_session, "jobs", "same-id")["title"] == "engineer"
        assert document_crud.get_by_id(db_session, "notes", "same-id")["text"] == "call back"
        assert document_crud.count(db_session, "jobs") == 1
        assert len(document_crud.get_all(db_session, "notes")) == 1

    def test_get_all_and_count(self, db_session):
        for i in range(3):
            document_crud.create(db_session, "jobs", {"title": f"Job {i}"})

        docs = document_crud.get_all(db_session, "jobs")

        assert len(docs) == 3
        assert all("id" in doc for doc in docs)
        assert document_crud.count(db_session, "jobs") == 3

    def test_count_empty_collection(self, db_session):
        assert document_crud.count(db_session, "jobs") == 0

    def test_get_page(self, db_session):
        for i in range(5):
            document_crud.create(db_session, "jobs", {"title": f"Job {i}"})

        first = document_crud.get_page(db_session, "jobs", limit=3, offset=0)
        second = document_crud.get_page(db_session, "jobs", limit=3, offset=3)
        beyond = document_crud.get_page(db_session, "jobs", limit=3, offset=6)

        assert len(first) == 3
        assert len(second) == 2
        assert beyond == []
        all_ids = {doc["id"] for doc in document_crud.get_all(db_session, "jobs")}
        assert {doc["id"] for doc in first} | {doc["id"] for doc in second} == all_ids
        assert not {doc["id"] for doc in first} & {doc["id"] for doc in second}


class TestUpdate:
    """Tests for document updates"""

    def test_merges_fields(self, db_session):
        doc_id = document_crud.create(db_session, "jobs", {"title": "engineer", "company": "abc"})

        assert document_crud.update(db_session, "jobs", doc_id, {"title": "senior engineer"}) is True

        doc = document_crud.get_by_id(db_session, "jobs", doc_id)
        assert doc["title"] == "senior engineer"
        assert doc["company"] == "abc"

    def test_refreshes_updated_at(self, db_session):
        doc_id = document_crud.create(db_session, "jobs", {
            "title": "engineer",
            "createdAt": "2024-03-23T12:00:00Z",
            "updatedAt": "2024-03-23T12:00:00Z",
        })

        document_crud.update(db_session, "jobs", doc_id, {"title": "senior engineer"})

        doc = document_crud.get_by_id(db_session, "jobs", doc_id)
        assert doc["createdAt"] == "2024-03-23T12:00:00Z"
        assert doc["updatedAt"] != "2024-03-23T12:00:00Z"

    def test_missing_document(self, db_session):
        assert document_crud.update(db_session, "jobs", "nope", {"title": "x"}) is False
        assert document_crud.count(db_session, "jobs") == 0


class TestDelete:
    """Tests for document deletion"""

    def test_delete(self, db_session):
        doc_id = document_crud.create(db_session, "jobs", {"title": "engineer"})

        assert document_crud.delete(db_session, "jobs", doc_id) is True
        assert document_crud.get_by_id(db_session, "jobs", doc_id) is None

    def test_delete_missing(self, db_session):
        assert document_crud.delete(db_session, "jobs", "nope") is False
