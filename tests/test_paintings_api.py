"""
Tests for the painting routes.

Covers the success, not-found and data-error paths of every route,
document ordering, and the walkthrough over paintings 1, 2 and 3.
"""

import json

from gallery_api.app.main import DATA_ERROR_TEXT


class TestListPaintings:
    def test_returns_full_document_in_order(self, client, paintings):
        resp = client.get("/api/paintings")
        assert resp.status_code == 200
        assert resp.json() == paintings

    def test_round_trips_unknown_fields(self, make_client, write_document, paintings):
        paintings[0]["extra"] = {"nested": [1, 2, 3], "note": None}
        client = make_client(write_document(paintings))
        assert client.get("/api/paintings").json() == paintings

    def test_empty_document_is_success(self, make_client, write_document):
        client = make_client(write_document([]))
        resp = client.get("/api/paintings")
        assert resp.status_code == 200
        assert resp.json() == []


class TestGetPainting:
    def test_returns_matching_record(self, client):
        resp = client.get("/api/paintings/2")
        assert resp.status_code == 200
        assert resp.json()["yearOfWork"] == 1503

    def test_unknown_id_is_404(self, client):
        resp = client.get("/api/paintings/99")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Painting not found :("}

    def test_first_duplicate_wins(self, make_client, write_document, paintings):
        duplicate = dict(paintings[1], title="Copy")
        client = make_client(write_document(paintings + [duplicate]))
        assert client.get("/api/paintings/2").json()["title"] == "Mona Lisa"

    def test_numeric_string_forms_match(self, client):
        assert client.get("/api/paintings/2.0").json()["paintingID"] == 2

    def test_underscored_number_is_not_an_id(self, client):
        assert client.get("/api/paintings/0_2").status_code == 404

    def test_huge_integer_id_is_not_found(self, make_client, write_document):
        client = make_client(write_document([{"paintingID": 10 ** 400, "yearOfWork": 1900}]))
        resp = client.get("/api/paintings/1")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Painting not found :("}

    def test_string_ids_compare_as_strings(self, make_client, write_document):
        client = make_client(write_document([{"paintingID": "abc", "yearOfWork": 1900}]))
        assert client.get("/api/paintings/abc").status_code == 200
        assert client.get("/api/paintings/ABC").status_code == 404


class TestListByGallery:
    def test_returns_matching_records_in_order(self, make_client, write_document, paintings):
        paintings[2]["gallery"]["galleryID"] = 21
        client = make_client(write_document(paintings))
        resp = client.get("/api/paintings/gallery/21")
        assert resp.status_code == 200
        assert [p["paintingID"] for p in resp.json()] == [1, 3]

    def test_unknown_gallery_is_404(self, client):
        resp = client.get("/api/paintings/gallery/999")
        assert resp.status_code == 404
        assert resp.json() == {"message": "No paintings found in this gallery :("}

    def test_record_without_gallery_is_skipped(self, make_client, write_document, paintings):
        del paintings[0]["gallery"]
        client = make_client(write_document(paintings))
        assert client.get("/api/paintings/gallery/21").status_code == 404
        assert client.get("/api/paintings/gallery/1").status_code == 200


class TestListByArtist:
    def test_returns_matching_records(self, client):
        resp = client.get("/api/paintings/artist/19")
        assert resp.status_code == 200
        assert [p["paintingID"] for p in resp.json()] == [3]

    def test_unknown_artist_is_404(self, client):
        resp = client.get("/api/paintings/artist/999")
        assert resp.status_code == 404
        assert resp.json() == {"message": "No paintings by this artist have been found :("}


class TestListByYearRange:
    def test_returns_records_in_range(self, client):
        resp = client.get("/api/paintings/year/1600/1700")
        assert resp.status_code == 200
        assert [p["paintingID"] for p in resp.json()] == [3]

    def test_bounds_are_inclusive(self, client):
        resp = client.get("/api/paintings/year/1503/1889")
        assert [p["paintingID"] for p in resp.json()] == [1, 2, 3]

    def test_empty_range_is_404(self, client):
        resp = client.get("/api/paintings/year/1700/1800")
        assert resp.status_code == 404
        assert resp.json() == {"message": "No paintings made in the range 1700 - 1800"}

    def test_inverted_range_is_404(self, client):
        assert client.get("/api/paintings/year/1900/1500").status_code == 404

    def test_non_numeric_bounds_are_404(self, client):
        resp = client.get("/api/paintings/year/early/late")
        assert resp.status_code == 404
        assert resp.json()["message"] == "No paintings made in the range early - late"


class TestDataErrors:
    def test_missing_file_is_500_plain_text(self, make_client, tmp_path):
        client = make_client(tmp_path / "missing.json")
        resp = client.get("/api/paintings")
        assert resp.status_code == 500
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == DATA_ERROR_TEXT

    def test_invalid_json_is_500(self, make_client, write_document):
        client = make_client(write_document("[{not json"))
        for path in ("/api/paintings", "/api/paintings/1", "/api/paintings/year/1/2"):
            resp = client.get(path)
            assert resp.status_code == 500
            assert resp.text == DATA_ERROR_TEXT

    def test_non_standard_numbers_are_500(self, make_client, write_document):
        for raw in ('[{"paintingID": 1, "yearOfWork": NaN}]', '[{"paintingID": ' + "9" * 5000 + "}]"):
            resp = make_client(write_document(raw)).get("/api/paintings")
            assert resp.status_code == 500
            assert resp.text == DATA_ERROR_TEXT

    def test_non_array_document_is_500(self, make_client, write_document):
        client = make_client(write_document({"paintings": []}))
        assert client.get("/api/paintings/gallery/1").status_code == 500

    def test_failure_does_not_affect_later_requests(self, make_client, write_document, paintings):
        path = write_document("oops")
        client = make_client(path)
        assert client.get("/api/paintings").status_code == 500
        path.write_text(json.dumps(paintings), encoding="utf-8")
        assert client.get("/api/paintings").status_code == 200


class TestDocumentReload:
    def test_document_is_reread_per_request(self, make_client, write_document, paintings):
        path = write_document(paintings)
        client = make_client(path)
        assert client.get("/api/paintings/99").status_code == 404
        path.write_text(json.dumps(paintings + [dict(paintings[0], paintingID=99)]), encoding="utf-8")
        assert client.get("/api/paintings/99").status_code == 200

    def test_cached_document_is_reused(self, make_client, write_document, paintings):
        path = write_document(paintings)
        client = make_client(path, cache_document=True)
        assert client.get("/api/paintings").status_code == 200
        path.unlink()
        assert client.get("/api/paintings").json() == paintings


class TestScenario:
    def test_walkthrough(self, client):
        assert client.get("/api/paintings/2").json()["yearOfWork"] == 1503
        assert [p["paintingID"] for p in client.get("/api/paintings/year/1600/1700").json()] == [3]

        missing = client.get("/api/paintings/99")
        assert missing.status_code == 404
        assert missing.json()["message"] == "Painting not found :("

        no_gallery = client.get("/api/paintings/gallery/12345")
        assert no_gallery.status_code == 404
        assert no_gallery.json()["message"] == "No paintings found in this gallery :("
