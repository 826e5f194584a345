"""Movie Routes — listing, genre filter, create, partial update, delete over HTTP.

Invariants:
    - GET /movies is ordered by title and embeds genre + language
    - Duplicate titles (any case) answer 409 and create nothing
    - Unknown ids answer 404 and leave the store unchanged
    - Updating one field leaves every other field unchanged
    - Store failures (FK violation) answer 500 with the generic message
"""

from filmoteca.models.movie import Movie


def _movie_body(seed, **overrides):
    body = {
        "title": "Cidade de Deus",
        "genre_id": seed["drama"],
        "language_id": seed["portuguese"],
        "oscar_count": 0,
        "release_date": "2002-08-30",
    }
    body.update(overrides)
    return body


# --- List / filter ------------------------------------------------------------


async def test_list_movies_embeds_genre_and_language(client, seed_catalog):
    res = await client.get("/movies")
    assert res.status_code == 200
    movies = res.json()
    assert len(movies) == 1
    assert movies[0]["title"] == "Central do Brasil"
    assert movies[0]["genre"] == {"id": seed_catalog["drama"], "name": "Drama"}
    assert movies[0]["language"]["name"] == "Portuguese"
    assert movies[0]["release_date"] == "1998-04-03"


async def test_list_movies_ordered_by_title(client, seed_catalog):
    await client.post("/movies", json=_movie_body(seed_catalog, title="Zodiac"))
    await client.post("/movies", json=_movie_body(seed_catalog, title="Amelie"))

    res = await client.get("/movies")
    titles = [m["title"] for m in res.json()]
    assert titles == ["Amelie", "Central do Brasil", "Zodiac"]


async def test_list_movies_empty_store(client):
    res = await client.get("/movies")
    assert res.status_code == 200
    assert res.json() == []


async def test_filter_by_genre_name_ignores_case(client, seed_catalog):
    await client.post("/movies", json=_movie_body(
        seed_catalog, title="Superbad", genre_id=seed_catalog["comedy"],
    ))

    res = await client.get("/movies/dRaMa")
    assert res.status_code == 200
    assert [m["title"] for m in res.json()] == ["Central do Brasil"]


async def test_filter_by_unknown_genre_returns_empty_list(client, seed_catalog):
    res = await client.get("/movies/Western")
    assert res.status_code == 200
    assert res.json() == []


# --- Create -------------------------------------------------------------------


async def test_create_movie_returns_201(client, seed_catalog, fetch_all):
    res = await client.post("/movies", json=_movie_body(seed_catalog))
    assert res.status_code == 201

    titles = {m.title for m in await fetch_all(Movie)}
    assert "Cidade de Deus" in titles


async def test_create_movie_parses_release_date(client, seed_catalog):
    await client.post("/movies", json=_movie_body(seed_catalog))

    res = await client.get("/movies/drama")
    created = next(m for m in res.json() if m["title"] == "Cidade de Deus")
    assert created["release_date"] == "2002-08-30"


async def test_create_duplicate_title_any_case_returns_409(
    client, seed_catalog, fetch_all,
):
    res = await client.post(
        "/movies", json=_movie_body(seed_catalog, title="CENTRAL DO BRASIL"),
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"
    assert len(await fetch_all(Movie)) == 1


async def test_create_with_unknown_genre_returns_500(
    client, seed_catalog, fetch_all,
):
    res = await client.post(
        "/movies", json=_movie_body(seed_catalog, genre_id=9999),
    )
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["message"] == "Internal server error"
    assert len(await fetch_all(Movie)) == 1


async def test_create_with_invalid_date_returns_400(client, seed_catalog):
    res = await client.post(
        "/movies", json=_movie_body(seed_catalog, release_date="not-a-date"),
    )
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.release_date" in fields


async def test_create_missing_fields_returns_400(client, seed_catalog):
    res = await client.post("/movies", json={"title": "Only a title"})
    assert res.status_code == 400


# --- Update -------------------------------------------------------------------


async def test_update_oscar_count_only_leaves_other_fields(
    client, seed_catalog, fetch_all,
):
    movie_id = seed_catalog["movie"]
    res = await client.put(f"/movies/{movie_id}", json={"oscar_count": 2})
    assert res.status_code == 200

    [movie] = await fetch_all(Movie)
    assert movie.oscar_count == 2
    assert movie.title == "Central do Brasil"
    assert movie.genre_id == seed_catalog["drama"]
    assert movie.language_id == seed_catalog["portuguese"]
    assert movie.release_date.isoformat() == "1998-04-03"


async def test_update_null_release_date_keeps_stored_value(
    client, seed_catalog, fetch_all,
):
    movie_id = seed_catalog["movie"]
    res = await client.put(
        f"/movies/{movie_id}", json={"release_date": None, "oscar_count": 1},
    )
    assert res.status_code == 200

    [movie] = await fetch_all(Movie)
    assert movie.release_date.isoformat() == "1998-04-03"


async def test_update_release_date_parses_iso_string(
    client, seed_catalog, fetch_all,
):
    movie_id = seed_catalog["movie"]
    await client.put(f"/movies/{movie_id}", json={"release_date": "1998-01-16"})

    [movie] = await fetch_all(Movie)
    assert movie.release_date.isoformat() == "1998-01-16"


async def test_update_changes_genre(client, seed_catalog):
    movie_id = seed_catalog["movie"]
    await client.put(
        f"/movies/{movie_id}", json={"genre_id": seed_catalog["comedy"]},
    )

    res = await client.get("/movies/comedy")
    assert [m["id"] for m in res.json()] == [movie_id]


async def test_update_unknown_movie_returns_404(client, seed_catalog, fetch_all):
    res = await client.put("/movies/9999", json={"oscar_count": 3})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"

    [movie] = await fetch_all(Movie)
    assert movie.oscar_count == 0


async def test_update_title_taken_by_other_movie_returns_409(
    client, seed_catalog, fetch_all,
):
    await client.post("/movies", json=_movie_body(seed_catalog))
    movie_id = seed_catalog["movie"]

    res = await client.put(
        f"/movies/{movie_id}", json={"title": "cidade de deus"},
    )
    assert res.status_code == 409
    titles = sorted(m.title for m in await fetch_all(Movie))
    assert titles == ["Central do Brasil", "Cidade de Deus"]


async def test_update_recasing_own_title_is_allowed(
    client, seed_catalog, fetch_all,
):
    movie_id = seed_catalog["movie"]
    res = await client.put(
        f"/movies/{movie_id}", json={"title": "CENTRAL DO BRASIL"},
    )
    assert res.status_code == 200
    [movie] = await fetch_all(Movie)
    assert movie.title == "CENTRAL DO BRASIL"


# --- Delete -------------------------------------------------------------------


async def test_delete_movie_returns_200_without_body(
    client, seed_catalog, fetch_all,
):
    res = await client.delete(f"/movies/{seed_catalog['movie']}")
    assert res.status_code == 200
    assert res.content == b""
    assert await fetch_all(Movie) == []


async def test_delete_unknown_movie_returns_404(client, seed_catalog, fetch_all):
    res = await client.delete("/movies/9999")
    assert res.status_code == 404
    assert len(await fetch_all(Movie)) == 1


# --- Accented titles ----------------------------------------------------------


async def test_create_duplicate_accented_title_returns_409(
    client, seed_catalog, fetch_all,
):
    first = await client.post(
        "/movies", json=_movie_body(seed_catalog, title="AÇÃO TOTAL"),
    )
    second = await client.post(
        "/movies", json=_movie_body(seed_catalog, title="ação total"),
    )

    assert first.status_code == 201
    assert second.status_code == 409
    titles = sorted(m.title for m in await fetch_all(Movie))
    assert titles == ["AÇÃO TOTAL", "Central do Brasil"]


async def test_update_to_accented_title_of_other_movie_returns_409(
    client, seed_catalog, fetch_all,
):
    await client.post(
        "/movies", json=_movie_body(seed_catalog, title="AÇÃO TOTAL"),
    )

    res = await client.put(
        f"/movies/{seed_catalog['movie']}", json={"title": "ação total"},
    )
    assert res.status_code == 409
    titles = sorted(m.title for m in await fetch_all(Movie))
    assert titles == ["AÇÃO TOTAL", "Central do Brasil"]


async def test_filter_by_accented_genre_name_ignores_case(client, seed_catalog):
    genre = await client.post("/genres", json={"name": "AÇÃO"})
    await client.post("/movies", json=_movie_body(
        seed_catalog, title="Tropa de Elite", genre_id=genre.json()["id"],
    ))

    res = await client.get("/movies/ação")
    assert [m["title"] for m in res.json()] == ["Tropa de Elite"]


async def test_negative_oscar_count_returns_400(client, seed_catalog, fetch_all):
    created = await client.post(
        "/movies", json=_movie_body(seed_catalog, oscar_count=-1),
    )
    updated = await client.put(
        f"/movies/{seed_catalog['movie']}", json={"oscar_count": -1},
    )

    assert created.status_code == 400
    assert updated.status_code == 400
    [movie] = await fetch_all(Movie)
    assert movie.oscar_count == 0
