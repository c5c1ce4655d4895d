from echoread.mcp.client import EchoreadClient


async def add_bookmark(
    client: EchoreadClient,
    user_id: str,
    summary_id: str,
    position: int,
    note: str | None = None,
) -> dict:
    body = {"user_id": user_id, "summary_id": summary_id, "position": position}
    if note is not None:
        body["note"] = note
    return await client.post("/api/bookmarks", json=body)


async def add_note(
    client: EchoreadClient,
    user_id: str,
    summary_id: str,
    content: str,
    position: int | None = None,
    private: bool = True,
) -> dict:
    body = {
        "user_id": user_id,
        "summary_id": summary_id,
        "content": content,
        "is_private": private,
    }
    if position is not None:
        body["position"] = position
    return await client.post("/api/notes", json=body)
