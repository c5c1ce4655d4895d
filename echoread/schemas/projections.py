"""Read-side composites joined at query time. Nothing here is persisted."""

from echoread.schemas.author import AuthorResponse
from echoread.schemas.book import BookResponse
from echoread.schemas.category import CategoryResponse
from echoread.schemas.reading import ReadingSessionResponse
from echoread.schemas.summary import SummaryResponse


class BookWithDetails(BookResponse):
    author: AuthorResponse | None = None
    category: CategoryResponse | None = None
    summaries: list[SummaryResponse] = []


class SummaryWithBook(SummaryResponse):
    book: BookWithDetails


class ReadingSessionWithSummary(ReadingSessionResponse):
    summary: SummaryWithBook
