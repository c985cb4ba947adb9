"""The show's hosts and how speakers are displayed in transcripts."""

from pydantic import BaseModel, Field

GUEST_IMAGE = "/guest-avatar.svg"
GUEST_COLOR = "#6b7280"


class SocialLink(BaseModel):
    title: str
    href: str


class HostInfo(BaseModel):
    """Display information for a transcript speaker."""

    name: str
    image: str
    color: str
    bio: str | None = None
    social_links: list[SocialLink] = Field(default_factory=list)


HOSTS: dict[str, HostInfo] = {
    "Ryo": HostInfo(
        name="Ryo",
        image="/ryo.JPG",
        color="#3b82f6",
        bio="VancouverのAsanaでソフトウェアエンジニアをしています。バレー/テニス/サッカー/ストレッチ好き",
        social_links=[
            SocialLink(title="X (Twitter)", href="https://x.com/togashi_ryo"),
            SocialLink(title="LinkedIn", href="https://www.linkedin.com/in/ryotogashi/"),
        ],
    ),
    "Senna": HostInfo(
        name="Senna",
        image="/senna.jpg",
        color="#ec4899",
        bio=(
            "日本で最も多くのIT専門職の海外就職者をサポートしてきたFrog代表。"
            "アメリカのスタートアップを中心に投資。"
            "カナダの海外就職やキャリア情報の発信は主にXから行うことが多いです！"
        ),
        social_links=[SocialLink(title="X (Twitter)", href="https://x.com/onepercentdsgn")],
    ),
    "Ayaka": HostInfo(
        name="Ayaka",
        image="/ayaka.jpg",
        color="#8b5cf6",
        bio="未経験からVancouverでソフトウェアエンジニアになりました。暮らすように旅するのが好き。現在の目標は朝型人間になる。",
        social_links=[
            SocialLink(title="X (Twitter)", href="https://x.com/ayacappuccino"),
            SocialLink(
                title="LinkedIn", href="https://www.linkedin.com/in/ayaka-yasuda-7ab597197/"
            ),
        ],
    ),
}


def get_host_info(speaker: str) -> HostInfo:
    """Host details for ``speaker``, or a generic guest entry."""
    host = HOSTS.get(speaker)
    if host is not None:
        return host
    return HostInfo(name=speaker, image=GUEST_IMAGE, color=GUEST_COLOR)


def get_all_hosts() -> list[HostInfo]:
    return list(HOSTS.values())


def is_known_host(speaker: str) -> bool:
    return speaker in HOSTS
