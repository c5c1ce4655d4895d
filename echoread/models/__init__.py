from echoread.models.author import Author
from echoread.models.book import Book
from echoread.models.bookmark import Bookmark
from echoread.models.category import Category
from echoread.models.note import Note
from echoread.models.reading import ReadingSession
from echoread.models.subscription import Subscription
from echoread.models.summary import Summary
from echoread.models.user import User

__all__ = [
    "Author",
    "Book",
    "Bookmark",
    "Category",
    "Note",
    "ReadingSession",
    "Subscription",
    "Summary",
    "User",
]
