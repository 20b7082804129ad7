from palette_studio.storage import AssetRecord, LocalAssetStore


def test_session_state_roundtrip(store):
    assert store.fetch_session_state("abc") is None
    store.save_session_state("abc", "color", {"palette": ["#000000"]})
    first = store.fetch_session_state("abc")
    assert first["mode"] == "color"
    assert first["state"] == {"palette": ["#000000"]}

    store.save_session_state("abc", "product", {})
    second = store.fetch_session_state("abc")
    assert second["mode"] == "product"
    assert second["created_at"] == first["created_at"]


def test_empty_session_key_is_ignored(store):
    store.save_session_state("", "color", {"x": 1})
    assert store.fetch_session_state("") is None


def test_list_assets_newest_first_and_filtered(store):
    store.record_generated_asset(AssetRecord("color", "image", "generate-creative", "s1", created_at="2024-01-01T00:00:00"))
    store.record_generated_asset(AssetRecord("color", "video", "generate-creative", "s1", created_at="2024-01-02T00:00:00"))
    store.record_generated_asset(AssetRecord("product", "image", "product-placement", "s1", created_at="2024-01-03T00:00:00"))
    store.record_generated_asset(AssetRecord("product", "image", "product-placement", "s2"))

    rows = store.list_assets("s1")
    assert [r["created_at"][:10] for r in rows] == ["2024-01-03", "2024-01-02", "2024-01-01"]
    assert [r["kind"] for r in store.list_assets("s1", kind="video")] == ["video"]
    assert len(store.list_assets("s1", limit=1)) == 1


def test_session_keys_cannot_escape_data_dir(tmp_path):
    store = LocalAssetStore(tmp_path / "data")
    store.save_session_state("../../evil", "color", {})
    assert not (tmp_path / "evil.json").exists()
    assert store.fetch_session_state("../../evil")["mode"] == "color"
