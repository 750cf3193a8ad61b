import io

import pytest

from wintergen.annotation_pass import AnnotationPass, EndpointData


@pytest.fixture
def annotation_pass(tmp_path):
    p = AnnotationPass(tmp_path, tmp_path)
    p.begin("Controller.h")
    return p


def feed(p, lines):
    out = io.StringIO()
    previous = ""
    results = []
    for line in lines:
        results.append(p.process(out, line, previous))
        previous = line
    return out.getvalue(), results


def test_should_process_headers_only(annotation_pass):
    assert annotation_pass.should_process("a/b/Controller.h")
    assert annotation_pass.should_process("Controller.hpp")
    assert not annotation_pass.should_process("Controller.cpp")


def test_endpoint_is_recorded_and_registered_on_class_close(annotation_pass):
    lines = [
        "class UserController : public Component {",
        "public:",
        '    $GET("/users")',
        "    HttpResponse* getUsers(HttpRequest* req);",
    ]
    _, results = feed(annotation_pass, lines)
    assert results == [False, False, False, False]
    assert annotation_pass.endpoint_data == [
        EndpointData("GET", "/users", "getUsers", "HttpRequest")
    ]

    out = io.StringIO()
    annotation_pass.process(out, "};", lines[-1])
    text = out.getvalue()
    assert 'uri = URI{"/users"};' in text
    assert 'HttpMethod::fromString("GET")' in text
    assert "return getUsers(req);" in text
    assert "Router::getInstance()->registerEndpoint(endpoint);" in text
    assert annotation_pass.endpoint_data == []


def test_rest_controller_name_is_collected(annotation_pass):
    feed(annotation_pass, ["$RestController", "class UserController : public Component {"])
    assert annotation_pass.rest_controllers == ["UserController"]


def test_post_construct_is_called_from_generated_helper(annotation_pass):
    text, _ = feed(
        annotation_pass,
        ["class Service : public Component {", "    $PostConstruct", "    void init();", "};"],
    )
    assert "_post_construct_helper_" in text
    assert "\t\tinit();\n" in text
    assert annotation_pass.post_construct_method_name == ""


def test_autowired_line_is_consumed_and_replaced(annotation_pass):
    text, results = feed(
        annotation_pass,
        ["class Controller : public Component {", "    $Autowired", "    UserService* userService;"],
    )
    assert results[-1] is True
    assert "(UserService*)(Component::getById(UserService::_componentId_));" in text
    assert "userService =" in text


def test_autowired_without_pointer_is_not_consumed(annotation_pass):
    _, results = feed(
        annotation_pass,
        ["class Controller : public Component {", "    $Autowired", "    int count;"],
    )
    assert results[-1] is False


def test_column_mapping_generated(annotation_pass):
    text, _ = feed(
        annotation_pass,
        [
            "class User : public Entity {",
            '    $Column("user_name")',
            "    std::string userName;",
            "};",
        ],
    )
    assert 'columnMappings["userName"] = "user_name";' in text
    assert "getColumnMappings() const override" in text
    assert annotation_pass.column_mappings == {}


def test_no_generation_for_plain_class(annotation_pass):
    text, results = feed(annotation_pass, ["class Plain {", "    int x;", "};"])
    assert text == ""
    assert not any(results)


def test_begin_resets_bracket_depth(annotation_pass):
    feed(annotation_pass, ["class Open {"])
    annotation_pass.begin("Other.h")
    feed(annotation_pass, ["$RestController", "class Second : public Component {"])
    assert annotation_pass.rest_controllers == ["Second"]


def test_processing_finished_truncates_router_file(tmp_path):
    router = tmp_path / "Router.cpp"
    router.write_text("stale")
    p = AnnotationPass(tmp_path, tmp_path)
    p.processing_finished()
    assert router.read_text() == ""