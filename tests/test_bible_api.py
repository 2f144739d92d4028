# tests/test_bible_api.py
"""
Tests for the /api/bible endpoints.

Built-in translations are pointed at a temporary directory holding a small
kjv.txt, so no real Bible texts are needed.
"""

import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path

from bible_lib.core import config
from bible_lib.routes import bible_api
from bible_lib.server import app

KJV_TEXT = """John 3:16 For God so loved the world...
John 3:17 For God sent not his Son into the world to condemn the world...
John 1:1 In the beginning was the Word...
Genesis 1:2 And the earth was without form...
Genesis 1:1 In the beginning God created the heaven and the earth.
Song of Solomon 2:4 He brought me to the banqueting house...
"""


@contextmanager
def api_client(enabled: str = "kjv"):
    """Test client serving KJV_TEXT as the kjv translation."""
    with tempfile.TemporaryDirectory() as tmpdir:
        Path(tmpdir, "kjv.txt").write_text(KJV_TEXT, encoding="utf-8")
        env = {"BIBLE_LIB_TRANSLATIONS_PATH": tmpdir, "BIBLE_LIB_TRANSLATIONS": enabled}
        saved = {key: os.environ.get(key) for key in env}
        os.environ.update(env)
        config.reload_settings()
        bible_api.reset_bibles()
        try:
            yield app.test_client()
        finally:
            for key, value in saved.items():
                if value is None:
                    os.environ.pop(key, None)
                else:
                    os.environ[key] = value
            config.reload_settings()
            bible_api.reset_bibles()


def test_listing_endpoints():
    """Test translations, books, chapters and verses listings."""
    print("\n=== Testing listing endpoints ===")

    with api_client() as client:
        resp = client.get("/api/bible/translations")
        assert resp.status_code == 200
        assert resp.get_json() == {
            "translations": [{"code": "kjv", "name": "King James Version"}],
            "default": "kjv",
        }
        print("✓ GET /translations")

        resp = client.get("/api/bible/books")
        data = resp.get_json()
        assert data["translation"] == {"code": "kjv", "name": "King James Version"}
        assert data["books"] == [
            {"book": "genesis", "name": "Genesis"},
            {"book": "john", "name": "John"},
            {"book": "song of solomon", "name": "Song Of Solomon"},
        ]
        print("✓ GET /books")

        resp = client.get("/api/bible/books/John/chapters")
        assert resp.get_json()["chapters"] == [1, 3]
        print("✓ GET /books/<book>/chapters")

        resp = client.get("/api/bible/books/john/chapters/3/verses")
        data = resp.get_json()
        assert data["verses"] == [16, 17]
        assert data["max_verse"] == 17
        print("✓ GET /books/<book>/chapters/<chapter>/verses")

        resp = client.get("/api/bible/books/jonah/chapters")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "book_not_found"
        resp = client.get("/api/bible/books/jonah/chapters/1/verses")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "chapter_not_found"
        print("✓ listings: missing book / chapter")

    print("Listing endpoints: All tests passed!")


def test_text_endpoints():
    """Test verse, chapter and random endpoints."""
    print("\n=== Testing text endpoints ===")

    with api_client() as client:
        resp = client.get("/api/bible/verse", query_string={"ref": "John 3:16"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["ref"] == "John 3:16"
        assert data["text"] == "For God so loved the world..."
        print("✓ GET /verse: single verse")

        resp = client.get(
            "/api/bible/verse",
            query_string={"ref": "john 3:16-17", "superscripts": "true", "translation": "KJV"},
        )
        data = resp.get_json()
        assert data["thru_verse"] == 17
        assert data["text"].startswith("¹⁶For God so loved")
        assert " ¹⁷For God sent not" in data["text"]
        print("✓ GET /verse: range with superscripts")

        resp = client.get("/api/bible/verse", query_string={"ref": "Song of Solomon 2:4"})
        assert resp.get_json()["text"] == "He brought me to the banqueting house..."
        print("✓ GET /verse: multi-word book")

        resp = client.get("/api/bible/books/genesis/chapters/1")
        data = resp.get_json()
        assert data["text"] == (
            "In the beginning God created the heaven and the earth. "
            "And the earth was without form..."
        )
        resp = client.get("/api/bible/books/genesis/chapters/1", query_string={"superscripts": "1"})
        assert resp.get_json()["text"].startswith("¹In the beginning")
        print("✓ GET /books/<book>/chapters/<chapter>")

        resp = client.get("/api/bible/random")
        data = resp.get_json()
        assert data["thru_verse"] is None
        assert data["text"]
        print("✓ GET /random")

        resp = client.get("/api/bible/verse")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "ref_required"

        resp = client.get("/api/bible/verse", query_string={"ref": "John three"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_verse_format"

        resp = client.get("/api/bible/verse", query_string={"ref": "John 4:1"})
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "chapter_not_found"

        resp = client.get("/api/bible/verse", query_string={"ref": "John 3:16-18"})
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "verse_not_found"
        print("✓ GET /verse: errors")

        resp = client.get("/api/bible/books", query_string={"translation": "niv"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_translation"

        resp = client.get("/api/bible/books", query_string={"translation": "asv"})
        assert resp.status_code == 503
        assert resp.get_json()["error"] == "translation_unavailable"
        print("✓ translation parameter: unknown and disabled")

    print("Text endpoints: All tests passed!")


def test_detect_endpoint():
    """Test reference detection endpoint."""
    print("\n=== Testing detect endpoint ===")

    with api_client() as client:
        resp = client.post(
            "/api/bible/detect",
            json={"text": "Start with John 1:1, then john 3:16-17 and Romans 8:28."},
        )
        assert resp.status_code == 200
        refs = resp.get_json()["references"]
        assert [r["ref"] for r in refs] == ["John 1:1", "John 3:16-17", "Romans 8:28"]
        assert refs[0]["text"] == "In the beginning was the Word..."
        assert refs[1]["text"].startswith("For God so loved the world... For God sent")
        assert refs[2]["text"] is None
        print("✓ POST /detect: references with text")

        resp = client.post("/api/bible/detect", json={})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "text_required"
        print("✓ POST /detect: text required")

        for body in (["John 3:16"], "John 3:16", None):
            resp = client.post("/api/bible/detect", json=body)
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "text_required"
        resp = client.post("/api/bible/detect", data="not json", content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "text_required"
        print("✓ POST /detect: body that is not a JSON object")

        for text in (42, ["John 3:16"], {"ref": "John 3:16"}):
            resp = client.post("/api/bible/detect", json={"text": text})
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "invalid_text"
        print("✓ POST /detect: text must be a string")

    with api_client(enabled="") as client:
        resp = client.post("/api/bible/detect", json={"text": "John 3:16"})
        assert resp.status_code == 503
        resp = client.get("/api/bible/translations")
        assert resp.get_json() == {"translations": [], "default": None}
        print("✓ no translations enabled")

    print("Detect endpoint: All tests passed!")


def test_shared_bible():
    """Test that each translation is indexed once and shared."""
    print("\n=== Testing shared Bible instances ===")

    with api_client():
        first = bible_api.get_bible("kjv")
        assert bible_api.get_bible("KJV") is first
        assert bible_api.get_bible() is first
        print("✓ get_bible: same instance for code and default")

        bible_api.reset_bibles()
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(bible_api.get_bible("kjv")))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(results) == 8
        assert all(bible is results[0] for bible in results)
        assert results[0] is not first
        print("✓ get_bible: concurrent first requests share one instance")

    print("Shared Bible instances: All tests passed!")


def main():
    """Run all tests."""
    print("=" * 60)
    print("Bible API Test Suite")
    print("=" * 60)

    test_listing_endpoints()
    test_text_endpoints()
    test_detect_endpoint()
    test_shared_bible()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
