from __future__ import annotations

import pytest

BLURB_HTML = """
<ol class="work index group">
<li id="work_12345" class="work blurb group work-12345 user-77" role="article">
  <div class="header module">
    <h4 class="heading">
      <a href="/works/12345">My Fic Title</a>
      by
      <a rel="author" href="/users/quillwright/pseuds/quillwright">quillwright</a>
      <a rel="author" href="/users/inkblot/pseuds/inkblot">inkblot</a>
    </h4>
    <h5 class="fandoms heading">
      <span class="landmark">Fandoms:</span>
      <a class="tag" href="/tags/Star%20Wars/works">Star Wars</a>
    </h5>
    <ul class="required-tags">
      <li><a class="help symbol question modal" title="Symbols key" href="/help/symbols-key.html"><span class="rating-teen rating" title="Teen And Up Audiences"><span class="text">Teen And Up Audiences</span></span></a></li>
      <li><a class="help symbol question modal" title="Symbols key" href="/help/symbols-key.html"><span class="warning-no warnings" title="No Archive Warnings Apply"><span class="text">No Archive Warnings Apply</span></span></a></li>
      <li><a class="help symbol question modal" title="Symbols key" href="/help/symbols-key.html"><span class="category-multi category" title="F/M, M/M"><span class="text">F/M, M/M</span></span></a></li>
      <li><a class="help symbol question modal" title="Symbols key" href="/help/symbols-key.html"><span class="complete-no iswip" title="Work in Progress"><span class="text">Work in Progress</span></span></a></li>
    </ul>
    <p class="datetime">15 Jan 2024</p>
  </div>
  <h6 class="landmark heading">Tags</h6>
  <ul class="tags commas">
    <li class="warnings"><strong><a class="tag" href="/tags/No%20Archive%20Warnings%20Apply/works">No Archive Warnings Apply</a></strong></li>
    <li class="relationships"><a class="tag" href="/tags/Rey*s*Ben%20Solo/works">Rey/Ben Solo</a></li>
    <li class="characters"><a class="tag" href="/tags/Rey%20(Star%20Wars)/works">Rey (Star Wars)</a></li>
    <li class="characters"><a class="tag" href="/tags/Ben%20Solo/works">Ben Solo</a></li>
    <li class="freeforms"><a class="tag" href="/tags/Fluff/works">Fluff</a></li>
    <li class="freeforms"><a class="tag" href="/tags/Angst/works">Angst</a></li>
  </ul>
  <h6 class="landmark heading">Summary</h6>
  <blockquote class="userstuff summary">
    <p>First paragraph.</p>
    <p>Second paragraph.</p>
  </blockquote>
  <h6 class="landmark heading">Series</h6>
  <ul class="series">
    <li>Part <strong>2</strong> of <a href="/series/1301696">The Long Road</a></li>
  </ul>
  <dl class="stats">
    <dt class="language">Language:</dt>
    <dd class="language" lang="en">English</dd>
    <dt class="words">Words:</dt>
    <dd class="words">12,345</dd>
    <dt class="chapters">Chapters:</dt>
    <dd class="chapters"><a href="/works/12345/chapters/1">3</a>/10</dd>
    <dt class="kudos">Kudos:</dt>
    <dd class="kudos"><a href="/works/12345/kudos">1,024</a></dd>
    <dt class="hits">Hits:</dt>
    <dd class="hits">20,480</dd>
  </dl>
</li>
</ol>
"""


def listing_html(
    *,
    href: str | None = "/works/12345",
    title: str = "My Fic Title",
    date_text: str | None = "15 Jan 2024",
) -> str:
    href_attr = f' href="{href}"' if href is not None else ""
    date_el = f'<p class="datetime">{date_text}</p>' if date_text is not None else ""
    return (
        '<li class="work blurb group" role="article">'
        f'<h4 class="heading"><a{href_attr}>{title}</a></h4>'
        f"{date_el}"
        "</li>"
    )


@pytest.fixture
def blurb_html() -> str:
    return BLURB_HTML


@pytest.fixture
def minimal_listing() -> str:
    return listing_html()
