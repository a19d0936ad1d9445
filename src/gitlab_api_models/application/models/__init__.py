from .abstract_model import AbstractModel
from .file import File
from .file_diff import FileDiff
from .merge_request import MergeRequest
from .milestone import Milestone
from .note import Note
from .noteable import Noteable
from .project import Project
from .user import User

__all__ = [
    "AbstractModel",
    "File",
    "FileDiff",
    "MergeRequest",
    "Milestone",
    "Note",
    "Noteable",
    "Project",
    "User",
]
