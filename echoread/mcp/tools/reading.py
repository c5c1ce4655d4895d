from echoread.mcp.client import EchoreadClient, is_error


async def start_reading(client: EchoreadClient, user_id: str, summary_id: str) -> dict:
    return await client.post(
        "/api/reading-sessions", json={"user_id": user_id, "summary_id": summary_id}
    )


async def update_reading_progress(
    client: EchoreadClient,
    session_id: str,
    progress_percent: int | None = None,
    current_position: int | None = None,
    time_spent_minutes: int | None = None,
    completed: bool | None = None,
) -> dict:
    body = {}
    if progress_percent is not None:
        body["progress_percent"] = progress_percent
    if current_position is not None:
        body["current_position"] = current_position
    if time_spent_minutes is not None:
        body["time_spent_minutes"] = time_spent_minutes
    if completed is not None:
        body["is_completed"] = completed
    return await client.put(f"/api/reading-sessions/{session_id}", json=body)


async def reading_history(
    client: EchoreadClient, user_id: str, completed: bool | None = None
) -> list[dict]:
    params = {}
    if completed is not None:
        params["completed"] = str(completed).lower()
    result = await client.get(f"/api/users/{user_id}/reading-sessions", params=params)
    if is_error(result):
        return []
    return [
        {
            "session_id": r["id"],
            "summary": r["summary"]["title"],
            "book": r["summary"]["book"]["title"],
            "progress_percent": r["progress_percent"],
            "is_completed": r["is_completed"],
            "last_accessed_at": r["last_accessed_at"],
        }
        for r in result
    ]
