from textwrap import dedent

PACKAGE_TEMPLATE = "package {{ package }}"

IMPORTS_TEMPLATE = dedent(
    """
    {% if imports | length == 1 %}
    import "{{ imports[0] }}"
    {%- else %}
    import (
    {% for path in imports %}
    {{ indent }}"{{ path }}"
    {% endfor %}
    )
    {%- endif %}
    """,
).strip()

TYPE_TEMPLATE = dedent(
    """
    type {{ type_name }} struct{{ "{" }}
    {%- if dependencies %}

    {% for dependency in dependencies %}
    {{ indent }}{{ dependency.field_name }} {{ dependency.type_expr }}
    {% endfor %}
    {% endif %}
    }
    """,
).strip()

METHODS_TEMPLATE = dedent(
    """
    func ({{ receiver_name }} *{{ type_name }}) {{ dependency.create_method_name }}() {{ dependency.type_expr }} {{ dependency.body }}

    func ({{ receiver_name }} *{{ type_name }}) {{ dependency.accessor_method_name }}() {{ dependency.type_expr }} {
    {{ indent }}if {{ receiver_name }}.{{ dependency.field_name }} == nil {
    {{ indent }}{{ indent }}{{ receiver_name }}.{{ dependency.field_name }} = {{ receiver_name }}.{{ dependency.create_method_name }}()
    {{ indent }}}
    {{ indent }}return {{ receiver_name }}.{{ dependency.field_name }}
    }
    """,
).strip()
