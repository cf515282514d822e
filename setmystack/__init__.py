"""setmystack -- interactive scaffolder for minimal Next.js projects."""

__version__ = "1.0.0"
