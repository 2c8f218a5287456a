from .users.user import User

from .videos.video import Video
from .videos.like import Like
