import pytest

from syntree.config import RenderOptions, get_render_options, set_render_options


def test_defaults_are_copied_on_read():
    options = get_render_options()
    options.font_size = 99

    assert get_render_options().font_size == 12


def test_set_render_options_round_trip():
    original = get_render_options()
    try:
        set_render_options(RenderOptions(font_size=20, color=False))
        assert get_render_options().font_size == 20
        assert get_render_options().color is False
    finally:
        set_render_options(original)


@pytest.mark.parametrize(
    'field, value, message',
    [
        ('font_size', 0, 'font size'),
        ('vertical_spacing', -1, 'vertical spacing'),
        ('margin', -5, 'margin'),
    ],
)
def test_validate_rejects_bad_values(field, value, message):
    options = RenderOptions(**{field: value})

    with pytest.raises(ValueError) as exc:
        options.validate()

    assert message in str(exc.value)


def test_layout_options_subset():
    layout = RenderOptions(font_size=16, vertical_spacing=30, term_lines=True).layout_options()

    assert layout.font_size == 16
    assert layout.vertical_spacing == 30
    assert layout.term_lines is True
    assert layout.padding_above_text == 6
