"""Demo catalog loaded into an empty database on first start."""
import logging
from datetime import datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from videoshare.auth.jwt import get_password_hash
from videoshare.models.comment import Comment
from videoshare.models.user import User, default_avatar_url
from videoshare.models.video import Video

logger = logging.getLogger(__name__)

SAMPLE_VIDEO_URL = "https://storage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4"
SAMPLE_SHORT_URL = "https://storage.googleapis.com/gtv-videos-bucket/sample/ForBiggerBlazes.mp4"

DEMO_USERS = [
    {"username": "admin", "password": "admin", "is_admin": True, "subscribers": 0},
    {"username": "GameMaster", "password": "password", "subscribers": 1_250_000},
    {"username": "ChefAnna", "password": "password", "subscribers": 87_400},
    {"username": "TechTalks", "password": "password", "subscribers": 356_000},
    {"username": "Wanderer", "password": "password", "subscribers": 4_200},
]

DEMO_VIDEOS = [
    {
        "channel": "GameMaster",
        "title": {"en": "Speedrunning a Classic Platformer", "ru": "Спидран классического платформера"},
        "description": {
            "en": "Every trick and skip explained frame by frame.",
            "ru": "Все трюки и пропуски, разобранные по кадрам."
        },
        "tags": ["gaming", "speedrun"],
        "views": 2_340_000,
        "duration": "14:05",
        "age": timedelta(days=3),
    },
    {
        "channel": "ChefAnna",
        "title": {"en": "Perfect Borscht in 30 Minutes", "ru": "Идеальный борщ за 30 минут"},
        "description": {
            "en": "A weeknight version of the classic soup.",
            "ru": "Быстрая версия классического супа на каждый день."
        },
        "tags": ["cooking", "soup"],
        "views": 98_500,
        "duration": "8:42",
        "age": timedelta(days=12),
    },
    {
        "channel": "TechTalks",
        "title": {"en": "How Large Language Models Work", "ru": "Как работают большие языковые модели"},
        "description": {
            "en": "Tokens, attention and training in plain words.",
            "ru": "Токены, внимание и обучение простыми словами."
        },
        "tags": ["tech", "ai"],
        "views": 512_000,
        "duration": "21:17",
        "age": timedelta(hours=20),
    },
    {
        "channel": "Wanderer",
        "title": {"en": "Two Weeks Across Georgia", "ru": "Две недели по Грузии"},
        "description": {
            "en": "Mountains, wine and the road in between.",
            "ru": "Горы, вино и дорога между ними."
        },
        "tags": ["travel", "vlog"],
        "views": 7_800,
        "duration": "17:30",
        "age": timedelta(days=45),
    },
    {
        "channel": "TechTalks",
        "title": {"en": "Building a Synth from Scratch", "ru": "Синтезатор своими руками"},
        "description": {
            "en": "Oscillators, filters and a lot of soldering.",
            "ru": "Осцилляторы, фильтры и много пайки."
        },
        "tags": ["tech", "music"],
        "views": 143_000,
        "duration": "12:58",
        "age": timedelta(days=90),
    },
    {
        "channel": "GameMaster",
        "title": {"en": "One Jump Challenge", "ru": "Испытание одного прыжка"},
        "description": {"en": "Can it be done?", "ru": "Получится ли?"},
        "tags": ["gaming"],
        "views": 880_000,
        "duration": "0:34",
        "age": timedelta(days=1),
        "is_shorts": True,
    },
    {
        "channel": "ChefAnna",
        "title": {"en": "Knife Trick in 20 Seconds", "ru": "Трюк с ножом за 20 секунд"},
        "description": {"en": "Dice an onion without tears.", "ru": "Нарезать лук без слёз."},
        "tags": ["cooking"],
        "views": 61_000,
        "duration": "0:20",
        "age": timedelta(hours=5),
        "is_shorts": True,
    },
]

DEMO_COMMENTS = [
    ("Speedrunning a Classic Platformer", "Wanderer", "That last skip is unreal!"),
    ("Perfect Borscht in 30 Minutes", "GameMaster", "Made it tonight, family loved it."),
    ("How Large Language Models Work", "ChefAnna", "Finally an explanation I understand."),
]


async def database_is_empty(session: AsyncSession) -> bool:
    result = await session.execute(select(func.count(User.id)))
    return (result.scalar() or 0) == 0


async def seed_demo_data(session: AsyncSession) -> bool:
    """
    Load demo channels, videos and comments.

    Args:
        session: Open database session

    Returns:
        True if data was inserted, False if the database already had users
    """
    if not await database_is_empty(session):
        logger.info("Database already contains data, skipping demo seed")
        return False

    now = datetime.utcnow()
    users = {}
    for entry in DEMO_USERS:
        user = User(
            username=entry["username"],
            hashed_password=get_password_hash(entry["password"]),
            avatar_url=default_avatar_url(entry["username"]),
            banner_url=f"https://picsum.photos/seed/{entry['username']}_banner/1280/240",
            is_admin=entry.get("is_admin", False),
            subscribers=entry["subscribers"],
            created_at=now - timedelta(days=365)
        )
        session.add(user)
        users[user.username] = user
    await session.flush()

    videos = {}
    for entry in DEMO_VIDEOS:
        is_shorts = entry.get("is_shorts", False)
        video = Video(
            channel_id=users[entry["channel"]].id,
            title=entry["title"],
            description=entry["description"],
            thumbnail_url=f"https://picsum.photos/seed/{entry['title']['en'].replace(' ', '_')}/360/202",
            video_url=SAMPLE_SHORT_URL if is_shorts else SAMPLE_VIDEO_URL,
            media_type="video",
            duration=entry["duration"],
            tags=entry["tags"],
            is_shorts=is_shorts,
            views=entry["views"],
            created_at=now - entry["age"]
        )
        session.add(video)
        videos[entry["title"]["en"]] = video
    await session.flush()

    for offset, (title, author, text) in enumerate(DEMO_COMMENTS):
        session.add(Comment(
            video_id=videos[title].id,
            author_id=users[author].id,
            text=text,
            likes=offset * 3,
            created_at=now - timedelta(hours=offset + 1)
        ))

    await session.commit()
    logger.info(
        "Seeded demo data",
        extra={"users": len(users), "videos": len(videos), "comments": len(DEMO_COMMENTS)}
    )
    return True
