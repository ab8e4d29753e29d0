# src/file_for_ai/config.py

DEFAULT_MODEL = "gpt-4"
DEFAULT_OUTPUT_FILE = "file-for-ai.txt"

# Environment fallbacks for the CLI options
ENV_MODEL = "MODEL"
ENV_OUTPUT_FILE = "FILE"
ENV_IGNORE_GITIGNORE = "IGNORE_GITIGNORE"
ENV_PROCESS_NON_TEXT = "PROCESS_NON_TEXT"

TRUTHY_VALUES = {"1", "true", "yes", "on"}

SEPARATOR_TEMPLATE = "\n\n>>>>>> {rel_path} <<<<<<\n\n"

GITIGNORE_FILENAME = ".gitignore"
GIT_EXCLUDE_FILE = ".git/info/exclude"

# Extensions treated as non-text. "" stands for files without an extension.
NON_TEXT_EXTENSIONS = frozenset({
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tiff", ".svg", ".psd", ".ai", ".webp", ".heic",
    # Audio
    ".mp3", ".wav", ".flac", ".aac", ".ogg", ".m4a", ".wma",
    # Video
    ".mp4", ".avi", ".mkv", ".mov", ".flv", ".wmv", ".m4v", ".mpg", ".mpeg", ".h264",
    # Archives
    ".zip", ".rar", ".7z", ".gz", ".tar", ".bz2", ".xz", ".tgz", ".zipx", ".iso",
    # Executables and packages
    ".exe", ".bin", ".dll", ".so", ".rpm", ".deb", ".dmg", ".bat", ".jar",
    # Office documents
    ".pdf", ".doc", ".docx", ".ppt", ".pptx", ".xls", ".xlsx", ".odt", ".ods",
    ".odp", ".epub", ".mobi",
    # 3D models
    ".obj", ".stl", ".dae", ".blend",
    # Databases
    ".sqlite", ".db", ".sql", ".mdb", ".accdb",
    # Compiled objects
    ".pyc", ".class", ".o", ".a", ".dylib", ".lib",
    # Adobe / Microsoft
    ".ps", ".eps", ".xps", ".swf", ".fla", ".indd",
    # Credentials
    ".pem", ".key", ".cert", ".crt",
    # Virtual machines
    ".vmdk", ".ovf", ".vdi",
    # Games
    ".pak", ".bsp", ".wad",
    # Fonts
    ".ttf", ".otf", ".woff", ".woff2",
    # Email
    ".pst", ".eml", ".msg",
    # Disk images
    ".img", ".vhdx",
    # No extension
    "",
    # Generic data
    ".dat",
    # Design tools
    ".xd", ".sketch",
    # CAD
    ".dwg", ".dxf",
})
