from ogembed.models import ComposedOutput, EmbedParams, ValidationResult


def test_embed_params_stripped_normalizes_missing_values():
    params = EmbedParams(title="  Hi ", desc="\tText\n", footer=None, image=None)
    cleaned = params.stripped()
    assert cleaned == EmbedParams(title="Hi", desc="Text", footer="", image="")


def test_validation_result_as_dict():
    assert ValidationResult(True).as_dict() == {"valid": True, "error": None, "code": None}
    failed = ValidationResult(False, "Title is required", "empty_field")
    assert failed.as_dict() == {
        "valid": False,
        "error": "Title is required",
        "code": "empty_field",
    }


def test_composed_output_escaped_keeps_markdown():
    composed = ComposedOutput(
        title='Tom & "Jerry"',
        description="<script>x</script>\n\n**bold**",
        footer_text="<b>",
        image_url="https://example.com/a.png?x=1&y=2",
        image_type="image/*",
    )
    escaped = composed.escaped()
    assert escaped.title == "Tom &amp; &quot;Jerry&quot;"
    assert escaped.description == "&lt;script&gt;x&lt;/script&gt;\n\n**bold**"
    assert escaped.footer_text == "&lt;b&gt;"
    assert escaped.image_url == "https://example.com/a.png?x=1&amp;y=2"
    assert escaped.image_type == "image/*"
    assert composed.title == 'Tom & "Jerry"'


def test_composed_output_has_image():
    assert ComposedOutput(title="t", description="d").has_image is False
    assert ComposedOutput(title="t", description="d", image_url="https://e.com/a.png").has_image is True
