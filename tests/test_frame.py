"""测试格式化器栈帧."""

from jsoncolor.frame import Frame


def test_root_frame() -> None:
    """根帧既不是对象也不是数组, 深度为 0."""
    root = Frame()

    assert root.is_root
    assert root.depth == 0
    assert not root.in_value_position


def test_child_depth() -> None:
    """子帧深度为父帧深度 + 1."""
    child = Frame().child(is_object=False, is_empty=True).child(is_object=True, is_empty=False)

    assert child.depth == 2
    assert child.is_object
    assert not child.is_array
    assert not child.is_empty


def test_object_toggles_field() -> None:
    """对象帧在字段名和值之间交替."""
    frame = Frame().child(is_object=True, is_empty=False)

    assert frame.expecting_field_name
    frame.toggle_field()
    assert frame.in_value_position
    frame.toggle_field()
    assert frame.expecting_field_name


def test_array_ignores_toggle() -> None:
    """数组帧不受 toggle_field() 影响."""
    frame = Frame().child(is_object=False, is_empty=False)

    frame.toggle_field()

    assert not frame.expecting_field_name
    assert not frame.in_value_position
