from pura_admin.services.overview import load_overview, time_ago

NOW = 1_700_000_000.0

def test_time_ago_buckets():
    ms = lambda seconds_ago: int((NOW - seconds_ago) * 1000)
    assert time_ago(ms(30), now=NOW) == "just now"
    assert time_ago(ms(5 * 60), now=NOW) == "5 minutes ago"
    assert time_ago(ms(3 * 3600), now=NOW) == "3 hours ago"
    assert time_ago(ms(2 * 86400), now=NOW) == "2 days ago"
    assert time_ago(ms(-60), now=NOW) == "just now"

def test_counts_and_recent(client, session):
    session.on("GET", "/api/testimonials", body={"data": [
        {"id": f"t{i}", "name": f"Tamu {i}", "created_at": i} for i in range(5)
    ]})
    session.on("GET", "/api/hero-slides", body={"data": [{"id": "h1", "created_at": 100}]})
    session.on("GET", "/api/galleries", body={"data": []})
    session.on("GET", "/api/activities", body={"data": [{"id": "a1", "title": "Odalan", "created_at": 50}]})
    session.on("GET", "/api/facilities", body={"data": [{"id": "f1", "name": "Wantilan", "created_at": 40}]})
    ov = load_overview(client)
    assert ov.error is None
    assert ov.counts == {"testimonials": 5, "hero-slides": 1, "gallery": 0, "activities": 1, "facilities": 1}
    assert len(ov.recent) == 7
    assert [r.id for r in ov.recent[:3]] == ["h1", "a1", "f1"]
    assert (ov.recent[1].kind, ov.recent[1].summary) == ("Activity", "Odalan")

def test_failure_zeroes_counts(client, session, network_down):
    session.on("GET", "/api/testimonials", exc=network_down)
    ov = load_overview(client)
    assert set(ov.counts.values()) == {0} and len(ov.counts) == 5
    assert ov.recent == [] and "connection refused" in ov.error
