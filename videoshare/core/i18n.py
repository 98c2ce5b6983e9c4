"""Static string table and locale-aware formatting.

Two languages are supported, ``en`` and ``ru``. Keys mirror the labels the
web client renders, plus the messages the API returns in error responses.
"""
from datetime import datetime
from typing import Dict, Optional

SUPPORTED_LANGUAGES = ("en", "ru")
DEFAULT_LANGUAGE = "en"

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "search": "Search",
        "signIn": "Sign In",
        "logout": "Logout",
        "home": "Home",
        "shorts": "Shorts",
        "subscriptions": "Subscriptions",
        "you": "You",
        "history": "History",
        "developerPanel": "Developer Panel",
        "signInToViewProfile": "Please sign in to see your profile.",
        "views": "views",
        "subscribers": "subscribers",
        "subscribed": "Subscribed",
        "subscribe": "Subscribe",
        "share": "Share",
        "comments": "Comments",
        "reply": "Reply",
        "signInToSubscribe": "Please sign in to subscribe.",
        "usernameError": "Username must be at least 3 characters long.",
        "passwordError": "Password must be at least 3 characters long.",
        "invalidCredentialsError": "Invalid username or password.",
        "usernameTakenError": "Username already taken. Try logging in.",
        "signUp": "Sign Up",
        "username": "Username",
        "enterUsername": "Enter your username",
        "password": "Password",
        "enterPassword": "Enter your password",
        "authDisclaimer": "Disclaimer: This is a demo. Do not use real passwords.",
        "dontHaveAccount": "Don't have an account?",
        "alreadyHaveAccount": "Already have an account?",
        "signInToComment": "Please sign in to leave a comment.",
        "addCommentPlaceholder": "Add a comment...",
        "cancel": "Cancel",
        "comment": "Comment",
        "channelNotFound": "Channel not found.",
        "uploads": "Uploads",
        "noUploads": "This channel hasn't uploaded any videos yet.",
        "mustBeLoggedInToUpload": "You must be logged in to upload a video.",
        "videoUploadedSuccessfully": "Video uploaded successfully!",
        "uploadNewVideo": "Upload a new video",
        "title": "Title",
        "description": "Description",
        "thumbnailUrl": "Thumbnail URL",
        "tagsLabel": "Tags (comma-separated)",
        "tagsPlaceholder": "e.g. gaming, review, tech",
        "uploadVideo": "Upload Video",
        "searchResultsFor": "Search results for",
        "noResultsFoundFor": 'No results found for "{query}". Try another search.',
        "manageUsers": "Manage Users",
        "user": "User",
        "role": "Role",
        "actions": "Actions",
        "admin": "Admin",
        "save": "Save",
        "editSubs": "Edit Subs",
        "toggleAdmin": "Toggle Admin",
        "delete": "Delete",
        "manageVideos": "Manage Videos",
        "video": "Video",
        "channel": "Channel",
        "edit": "Edit",
        "editVideo": "Edit Video",
        "saveChanges": "Save Changes",
        "confirmUserDeletion": "Are you sure you want to delete this user and all their videos? This action cannot be undone.",
        "confirmVideoDeletion": "Are you sure you want to delete this video?",
        "like": "Like",
        "dislike": "Dislike",
        "toggleTheme": "Toggle Theme",
        # Categories
        "all": "All",
        "gaming": "Gaming",
        "music": "Music",
        "cartoons": "Cartoons",
        "tech": "Tech",
        "cooking": "Cooking",
        "travel": "Travel",
        "ai": "AI",
        # Channel Edit
        "editChannel": "Edit Channel",
        "avatar": "Avatar",
        "banner": "Banner",
        "change": "Change",
        "usernameTakenSuggestions": 'Username "{username}" is taken. Try: {suggestions}',
        "profileUpdated": "Profile updated successfully!",
        # Upload
        "uploadVideoTab": "Upload Video",
        "uploadShortTab": "Upload Short",
        "videoFileLabel": "Video or Audio file (MP4, MP3)",
        "thumbnailFileLabel": "Thumbnail file",
        "chooseFile": "Choose file",
        "noFileChosen": "No file chosen",
        "titleAndVideoRequired": "Title and a video/audio file are required.",
        "customThumbnailRequired": "Please select a thumbnail file or uncheck the custom thumbnail option.",
        "useCustomThumbnail": "Use custom thumbnail",
        # History
        "searchWatchHistory": "Search watch history",
        "clearWatchHistory": "Clear all watch history",
        "watchHistoryEmpty": "This list has no videos.",
        "confirmClearHistory": "Are you sure you want to clear your entire watch history? This action cannot be undone.",
        # API messages
        "justNow": "Just now",
        "notAuthenticated": "Please sign in to continue.",
        "invalidToken": "Your session is invalid or has expired. Please sign in again.",
        "adminRequired": "Admin privileges required.",
        "userNotFound": "User not found.",
        "videoNotFound": "Video not found.",
        "cannotDeleteSelf": "You cannot delete yourself.",
        "cannotChangeOwnAdmin": "You cannot change your own admin status.",
        "commentEmpty": "Comment cannot be empty.",
        "unsupportedFileType": 'Unsupported file type "{extension}".',
        "fileTooLarge": "File too large. Maximum size is {max_mb} MB.",
        "invalidSubscriberCount": "Subscriber count must be zero or more.",
        "unknownCategory": 'Unknown category "{category}".',
        "validationError": "Invalid request.",
        "internalError": "An unexpected error occurred.",
    },
    "ru": {
        "search": "Поиск",
        "signIn": "Войти",
        "logout": "Выйти",
        "home": "Главная",
        "shorts": "Shorts",
        "subscriptions": "Подписки",
        "you": "Вы",
        "history": "История",
        "developerPanel": "Панель разработчика",
        "signInToViewProfile": "Пожалуйста, войдите, чтобы увидеть свой профиль.",
        "views": "просмотров",
        "subscribers": "подписчиков",
        "subscribed": "Вы подписаны",
        "subscribe": "Подписаться",
        "share": "Поделиться",
        "comments": "Комментарии",
        "reply": "Ответить",
        "signInToSubscribe": "Пожалуйста, войдите, чтобы подписаться.",
        "usernameError": "Имя пользователя должно быть не менее 3 символов.",
        "passwordError": "Пароль должен быть не менее 3 символов.",
        "invalidCredentialsError": "Неверное имя пользователя или пароль.",
        "usernameTakenError": "Имя пользователя уже занято. Попробуйте войти.",
        "signUp": "Регистрация",
        "username": "Имя пользователя",
        "enterUsername": "Введите имя пользователя",
        "password": "Пароль",
        "enterPassword": "Введите пароль",
        "authDisclaimer": "Дисклеймер: Это демонстрация. Не используйте настоящие пароли.",
        "dontHaveAccount": "Нет аккаунта?",
        "alreadyHaveAccount": "Уже есть аккаунт?",
        "signInToComment": "Пожалуйста, войдите, чтобы оставить комментарий.",
        "addCommentPlaceholder": "Оставьте комментарий...",
        "cancel": "Отмена",
        "comment": "Оставить комментарий",
        "channelNotFound": "Канал не найден.",
        "uploads": "Видео",
        "noUploads": "На этом канале пока нет видео.",
        "mustBeLoggedInToUpload": "Вы должны войти в систему, чтобы загрузить видео.",
        "videoUploadedSuccessfully": "Видео успешно загружено!",
        "uploadNewVideo": "Загрузить новое видео",
        "title": "Название",
        "description": "Описание",
        "thumbnailUrl": "URL обложки",
        "tagsLabel": "Теги (через запятую)",
        "tagsPlaceholder": "например, игры, обзор, технологии",
        "uploadVideo": "Загрузить видео",
        "searchResultsFor": "Результаты поиска по запросу",
        "noResultsFoundFor": 'По запросу "{query}" ничего не найдено. Попробуйте другой запрос.',
        "manageUsers": "Управление пользователями",
        "user": "Пользователь",
        "role": "Роль",
        "actions": "Действия",
        "admin": "Админ",
        "save": "Сохранить",
        "editSubs": "Изм. подп.",
        "toggleAdmin": "Сменить роль",
        "delete": "Удалить",
        "manageVideos": "Управление видео",
        "video": "Видео",
        "channel": "Канал",
        "edit": "Редакт.",
        "editVideo": "Редактировать видео",
        "saveChanges": "Сохранить изменения",
        "confirmUserDeletion": "Вы уверены, что хотите удалить этого пользователя и все его видео? Это действие необратимо.",
        "confirmVideoDeletion": "Вы уверены, что хотите удалить это видео?",
        "like": "Нравится",
        "dislike": "Не нравится",
        "toggleTheme": "Переключить тему",
        # Categories
        "all": "Все",
        "gaming": "Игры",
        "music": "Музыка",
        "cartoons": "Мультфильмы",
        "tech": "Технологии",
        "cooking": "Кулинария",
        "travel": "Путешествия",
        "ai": "ИИ",
        # Channel Edit
        "editChannel": "Редактировать канал",
        "avatar": "Аватар",
        "banner": "Баннер",
        "change": "Изменить",
        "usernameTakenSuggestions": 'Имя "{username}" занято. Попробуйте: {suggestions}',
        "profileUpdated": "Профиль успешно обновлен!",
        # Upload
        "uploadVideoTab": "Загрузить видео",
        "uploadShortTab": "Загрузить Short",
        "videoFileLabel": "Файл видео или аудио (MP4, MP3)",
        "thumbnailFileLabel": "Файл обложки",
        "chooseFile": "Выберите файл",
        "noFileChosen": "Файл не выбран",
        "titleAndVideoRequired": "Требуется название и файл видео/аудио.",
        "customThumbnailRequired": "Пожалуйста, выберите файл обложки или отключите эту опцию.",
        "useCustomThumbnail": "Использовать свою обложку",
        # History
        "searchWatchHistory": "Искать в истории просмотра",
        "clearWatchHistory": "Очистить всю историю просмотра",
        "watchHistoryEmpty": "В этом списке нет видео.",
        "confirmClearHistory": "Вы уверены, что хотите очистить всю историю просмотра? Это действие нельзя будет отменить.",
        # API messages
        "justNow": "Только что",
        "notAuthenticated": "Пожалуйста, войдите, чтобы продолжить.",
        "invalidToken": "Сессия недействительна или истекла. Войдите снова.",
        "adminRequired": "Требуются права администратора.",
        "userNotFound": "Пользователь не найден.",
        "videoNotFound": "Видео не найдено.",
        "cannotDeleteSelf": "Вы не можете удалить себя.",
        "cannotChangeOwnAdmin": "Вы не можете изменить свой статус администратора.",
        "commentEmpty": "Комментарий не может быть пустым.",
        "unsupportedFileType": 'Неподдерживаемый тип файла "{extension}".',
        "fileTooLarge": "Файл слишком большой. Максимальный размер {max_mb} МБ.",
        "invalidSubscriberCount": "Число подписчиков не может быть отрицательным.",
        "unknownCategory": 'Неизвестная категория "{category}".',
        "validationError": "Некорректный запрос.",
        "internalError": "Произошла непредвиденная ошибка.",
    },
}

# Home feed categories; "All" disables filtering
CATEGORIES = ("All", "Gaming", "Music", "Cartoons", "Tech", "Cooking", "Travel", "AI")

_TIME_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
)

_RU_UNIT_FORMS = {
    "year": ("год", "года", "лет"),
    "month": ("месяц", "месяца", "месяцев"),
    "week": ("неделю", "недели", "недель"),
    "day": ("день", "дня", "дней"),
    "hour": ("час", "часа", "часов"),
    "minute": ("минуту", "минуты", "минут"),
}

_COMPACT_SUFFIXES = {
    "en": ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K")),
    "ru": ((1_000_000_000, "\u00a0млрд"), (1_000_000, "\u00a0млн"), (1_000, "\u00a0тыс.")),
}


def normalize_language(language: Optional[str]) -> str:
    """Map a language tag such as ``ru-RU`` onto a supported language."""
    if not language:
        return DEFAULT_LANGUAGE
    primary = language.strip().lower().replace("_", "-").split("-")[0]
    return primary if primary in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def parse_accept_language(header: Optional[str]) -> Optional[str]:
    """
    Pick the best supported language from an Accept-Language header.

    Args:
        header: Raw header value, e.g. ``"ru-RU,ru;q=0.9,en;q=0.8"``

    Returns:
        Supported language code or None if nothing matches
    """
    if not header:
        return None

    candidates = []
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        quality = 1.0
        if params.strip().startswith("q="):
            try:
                quality = float(params.strip()[2:])
            except ValueError:
                quality = 0.0
        primary = tag.strip().lower().split("-")[0]
        if primary in SUPPORTED_LANGUAGES and quality > 0:
            candidates.append((-quality, position, primary))

    if not candidates:
        return None
    return min(candidates)[2]


def t(key: str, language: str = DEFAULT_LANGUAGE, **params) -> str:
    """Translate a key, substituting ``{param}`` placeholders."""
    table = TRANSLATIONS.get(normalize_language(language), TRANSLATIONS[DEFAULT_LANGUAGE])
    translation = table.get(key, key)
    for name, value in params.items():
        translation = translation.replace("{" + name + "}", str(value))
    return translation


def _ru_plural(count: int, forms) -> str:
    one, few, many = forms
    if count % 10 == 1 and count % 100 != 11:
        return one
    if 2 <= count % 10 <= 4 and not 12 <= count % 100 <= 14:
        return few
    return many


def relative_time_label(moment: datetime, language: str = DEFAULT_LANGUAGE, now: Optional[datetime] = None) -> str:
    """Render ``moment`` as "3 days ago" / "3 дня назад"."""
    language = normalize_language(language)
    now = now or datetime.utcnow()
    seconds = int((now - moment).total_seconds())

    for unit, unit_seconds in _TIME_UNITS:
        count = seconds // unit_seconds
        if count >= 1:
            if language == "ru":
                return f"{count} {_ru_plural(count, _RU_UNIT_FORMS[unit])} назад"
            return f"{count} {unit}{'' if count == 1 else 's'} ago"

    return t("justNow", language)


def format_compact_number(value: int, language: str = DEFAULT_LANGUAGE) -> str:
    """Compact notation with at most one fraction digit (1.2K, 3,4 млн)."""
    language = normalize_language(language)
    units = _COMPACT_SUFFIXES[language]
    for index, (threshold, suffix) in enumerate(units):
        if abs(value) >= threshold:
            scaled = round(value / threshold, 1)
            # 999_999 rounds to 1000K, which reads as 1M
            if abs(scaled) >= 1000 and index > 0:
                threshold, suffix = units[index - 1]
                scaled = round(value / threshold, 1)
            text = f"{scaled:.1f}".rstrip("0").rstrip(".")
            if language == "ru":
                text = text.replace(".", ",")
            return f"{text}{suffix}"
    return str(value)


def views_label(views: int, language: str = DEFAULT_LANGUAGE) -> str:
    return f"{format_compact_number(views, language)} {t('views', language)}"
