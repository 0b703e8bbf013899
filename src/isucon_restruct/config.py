from pydantic import BaseModel, ConfigDict

DEFAULT_API_MARKERS: tuple[str, ...] = (
    "GET",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "web::",
    "HttpResponse",
    "actix_web::",
)


class RestructureConfig(BaseModel):
    """Settings for one restructuring run.

    ``api_markers`` are plain substrings: a function whose text contains any of
    them is filed under ``resources`` instead of ``functions``.
    """

    model_config = ConfigDict(frozen=True)

    source_dir: str = "src"
    entry_file: str = "main"
    extension: str = "rs"
    entry_routine: str = "main"
    api_markers: tuple[str, ...] = DEFAULT_API_MARKERS

    def file_name(self, stem: str) -> str:
        return f"{stem}.{self.extension}"

    @property
    def entry_file_name(self) -> str:
        return self.file_name(self.entry_file)
