from hellokit.siteinfo import crawl, extract_site_info


def test_meta_description_and_link_icon():
    html = (
        "<html><head><title>Title</title>"
        '<meta name="Description" content="A search site">'
        '<link rel="icon" href="/favicon.ico">'
        "</head><body></body></html>"
    )
    assert extract_site_info(html) == {"description": "A search site", "icon": "/favicon.ico"}


def test_title_used_when_no_description():
    html = "<html><head><title>Pay online</title></head><body></body></html>"
    assert extract_site_info(html) == {"description": "Pay online"}


def test_logo_image_sets_icon():
    html = (
        "<html><head><title>T</title><link rel='icon' href='/a.ico'></head>"
        "<body><div class='logo'><img src='/logo.png'></div></body></html>"
    )
    assert extract_site_info(html)["icon"] == "/logo.png"


def test_shortcut_icon_is_not_matched():
    html = "<html><head><link rel='shortcut icon' href='/a.ico'></head></html>"
    assert "icon" not in extract_site_info(html)


def test_crawl_skips_failures():
    pages = {"http://a.example.com": "<html><head><title>A</title></head></html>"}

    def fetch(url):
        if url not in pages:
            raise OSError("connection refused")
        return pages[url]

    result = crawl(["http://a.example.com", "http://b.example.com"], fetch)
    assert result == {"http://a.example.com": {"description": "A"}}