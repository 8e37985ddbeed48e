"""Markup builders mimicking the source site's listing layouts."""

from __future__ import annotations


def grid_item(
    *,
    href: str | None = "/watch/demo-1",
    title: str | None = "Demo Show",
    text: str = "Demo Show",
    data_src: str | None = None,
    src: str | None = None,
    episodes: tuple[str, ...] = (),
) -> str:
    link_attrs = ""
    if href is not None:
        link_attrs += f' href="{href}"'
    if title is not None:
        link_attrs += f' title="{title}"'
    img_attrs = ""
    if data_src is not None:
        img_attrs += f' data-src="{data_src}"'
    if src is not None:
        img_attrs += f' src="{src}"'
    episode_markup = "".join(
        f'<span class="fdi-item">{episode}</span>' for episode in episodes
    )
    return (
        '<div class="flw-item">'
        f'<div class="film-poster"><img class="film-poster-img"{img_attrs}></div>'
        '<div class="film-detail">'
        f'<h3 class="film-name"><a{link_attrs}>{text}</a></h3>'
        f'<div class="fd-infor">{episode_markup}</div>'
        "</div>"
        "</div>"
    )


def grid_page(*items: str) -> str:
    return (
        "<html><body><div class=\"film_list-wrap\">"
        + "".join(items)
        + "</div></body></html>"
    )


def slug_page(*slugs: str) -> str:
    """A grid page whose items are identified only by their slug."""

    return grid_page(
        *(
            grid_item(href=f"/watch/{slug}", title=slug.title(), text=slug)
            for slug in slugs
        )
    )
