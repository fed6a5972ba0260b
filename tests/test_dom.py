from portfolio.ui.dom import Document, Element, MutationObserver
from portfolio.ui.events import Event, Scheduler, debounce

from conftest import INDEX_HTML, fill


def test_grouped_selector_keeps_document_order():
    document = Document.from_html(INDEX_HTML)
    found = document.query_selector_all(".skill-card, .project-card, .contact-item")
    assert len(found) == 6
    assert [el.class_name for el in found][:3] == ["skill-card"] * 3


def test_attribute_prefix_selector():
    document = Document.from_html(INDEX_HTML)
    hrefs = [a.get_attribute("href") for a in document.query_selector_all('a[href^="#"]')]
    assert "#projects" in hrefs
    assert all(h.startswith("#") for h in hrefs)


def test_click_bubbles_to_ancestors_and_document():
    document = Document()
    parent = document.body.append_child(Element("div"))
    child = parent.append_child(Element("span"))
    seen = []
    parent.add_event_listener("click", lambda e: seen.append("parent"))
    document.add_event_listener("click", lambda e: seen.append("document"))

    event = child.click()

    assert seen == ["parent", "document"]
    assert event.target is child


def test_class_change_notifies_mutation_observer():
    document = Document()
    el = document.body.append_child(Element("ul"))
    records = []
    MutationObserver(document, lambda recs, obs: records.extend(recs)).observe(el, attribute_filter=["class"])

    el.class_list.add("active")
    el.set_attribute("title", "ignored")

    assert [r.attribute_name for r in records] == ["class"]


def test_form_data_and_reset():
    document = Document.from_html(INDEX_HTML)
    form = document.get_element_by_id("contact-form")
    fill(document, name="Al", email="a@b.co", message="hello there friend")

    assert form.form_data() == {"name": "Al", "email": "a@b.co", "message": "hello there friend"}
    form.reset()
    assert form.form_data() == {"name": "", "email": "", "message": ""}


def test_removed_element_is_disconnected():
    document = Document()
    el = document.body.append_child(Element("div"))
    assert el.is_connected
    el.remove()
    assert not el.is_connected


def test_scheduler_runs_in_due_order():
    scheduler = Scheduler()
    ran = []
    scheduler.set_timeout(lambda: ran.append("b"), 200)
    scheduler.set_timeout(lambda: ran.append("a"), 100)
    cancelled = scheduler.set_timeout(lambda: ran.append("x"), 150)
    scheduler.clear_timeout(cancelled)

    scheduler.advance(199)
    assert ran == ["a"]
    scheduler.advance(1)
    assert ran == ["a", "b"]
    assert scheduler.now == 200


def test_debounce_keeps_only_last_call():
    scheduler = Scheduler()
    calls = []
    debounced = debounce(scheduler, calls.append, 250)

    debounced(1)
    scheduler.advance(100)
    debounced(2)
    scheduler.advance(249)
    assert calls == []
    scheduler.advance(1)
    assert calls == [2]


def test_document_ready_event():
    document = Document(ready_state="loading")
    fired = []
    document.add_event_listener("DOMContentLoaded", lambda e: fired.append(e.type))
    document.mark_ready()
    assert fired == ["DOMContentLoaded"]
    assert document.ready_state == "interactive"


def test_event_prevent_default():
    event = Event("click")
    event.prevent_default()
    assert event.default_prevented


def test_selectors_track_class_and_attribute_changes():
    document = Document.from_html(INDEX_HTML)
    menu = document.get_element_by_id("nav-menu")
    assert document.query_selector("ul.active") is None

    menu.class_list.add("active")
    assert document.query_selector("ul.active") is menu

    img = document.query_selector("img[data-src]")
    img.remove_attribute("data-src")
    assert img not in document.query_selector_all("img[data-src]")


def test_removed_element_leaves_query_results():
    document = Document.from_html(INDEX_HTML)
    card = document.query_selector(".skill-card")
    card.remove()
    assert card not in document.query_selector_all(".skill-card")
    assert len(document.query_selector_all(".skill-card")) == 2


def test_element_query_is_scoped_to_descendants():
    document = Document.from_html(INDEX_HTML)
    menu = document.get_element_by_id("nav-menu")
    links = menu.query_selector_all("li .nav-link")
    assert len(links) == 4
    assert menu.query_selector("#nav-menu") is None
