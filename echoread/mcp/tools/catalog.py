from echoread.mcp.client import EchoreadClient, is_error


async def list_categories(client: EchoreadClient) -> list[dict]:
    result = await client.get("/api/categories")
    if is_error(result):
        return []
    return [{"id": c["id"], "name": c["name"], "slug": c["slug"]} for c in result]


async def browse_books(
    client: EchoreadClient,
    category: str | None = None,
    popular: bool | None = None,
    featured: bool | None = None,
    limit: int = 20,
) -> list[dict]:
    params: dict = {"limit": limit}
    if category:
        found = await client.get(f"/api/categories/by-slug/{category}")
        if is_error(found):
            return []
        params["category_id"] = found["id"]
    if popular is not None:
        params["popular"] = str(popular).lower()
    if featured is not None:
        params["featured"] = str(featured).lower()
    result = await client.get("/api/books", params=params)
    if is_error(result):
        return []
    return [
        {
            "id": b["id"],
            "title": b["title"],
            "author": b["author"]["name"] if b.get("author") else None,
            "category": b["category"]["name"] if b.get("category") else None,
            "rating": b["rating"],
            "summaries": len(b["summaries"]),
        }
        for b in result
    ]


async def get_book(client: EchoreadClient, book_id: str) -> dict:
    return await client.get(f"/api/books/{book_id}")


async def read_summary(client: EchoreadClient, summary_id: str) -> dict:
    result = await client.get(f"/api/summaries/{summary_id}")
    if is_error(result):
        return result
    return {
        "id": result["id"],
        "book_title": result["book"]["title"],
        "title": result["title"],
        "summary_type": result["summary_type"],
        "reading_time_minutes": result["reading_time_minutes"],
        "content": result["content"],
        "key_takeaways": result["key_takeaways"] or [],
        "big_ideas": [
            {"title": idea["title"], "content": idea["content"]}
            for idea in result["big_ideas"] or []
        ],
    }
