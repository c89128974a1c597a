from autousecase.scanner import extract_descriptors
from autousecase.spec import MethodDescriptor, ParameterKind, ReturnShape


def test_parse_error_union_method():
    source = "Future<Either<Failure, User>> getUser(String id);"

    descriptors = extract_descriptors(source)

    assert len(descriptors) == 1
    method = descriptors[0]
    assert isinstance(method, MethodDescriptor)
    assert method.name == "getUser"
    assert method.return_type == "User"
    assert method.shape == ReturnShape.ERROR_UNION_FUTURE
    assert method.is_void_return is False

    assert len(method.parameters) == 1
    param = method.parameters[0]
    assert param.type == "String"
    assert param.name == "id"
    assert param.kind == ParameterKind.POSITIONAL
    assert param.is_required_named is False


def test_parse_plain_void_future():
    descriptors = extract_descriptors("Future<void> bar();")

    assert len(descriptors) == 1
    method = descriptors[0]
    assert method.shape == ReturnShape.PLAIN_FUTURE
    assert method.return_type == "void"
    assert method.is_void_return is True
    assert method.parameters == ()


def test_parse_stream_with_generic_payload():
    descriptors = extract_descriptors(
        "Stream<List<Message>> watchMessages(String roomId);"
    )

    assert len(descriptors) == 1
    method = descriptors[0]
    assert method.shape == ReturnShape.STREAM
    assert method.return_type == "List<Message>"
    assert [p.name for p in method.parameters] == ["roomId"]


def test_parse_named_parameters_with_required_and_default():
    source = (
        "Future<Either<Failure, Order>> createOrder("
        "{required String productId, int quantity = 1, String? couponCode});"
    )

    method = extract_descriptors(source)[0]

    assert [p.name for p in method.parameters] == [
        "productId",
        "quantity",
        "couponCode",
    ]
    product_id, quantity, coupon = method.parameters

    assert product_id.kind == ParameterKind.REQUIRED_NAMED
    assert product_id.is_required_named is True
    assert product_id.type == "String"

    assert quantity.kind == ParameterKind.NAMED
    assert quantity.is_required_named is False
    assert quantity.default == "1"

    assert coupon.kind == ParameterKind.NAMED
    assert coupon.type == "String?"
    assert coupon.default is None


def test_generic_commas_do_not_split_parameters():
    source = (
        "Future<Either<Failure, List<Product>>> search("
        "Map<String, int> weights, {required Map<String, dynamic>? filters});"
    )

    method = extract_descriptors(source)[0]

    assert method.return_type == "List<Product>"
    assert len(method.parameters) == 2

    weights, filters = method.parameters
    assert weights.type == "Map<String, int>"
    assert weights.name == "weights"
    assert weights.kind == ParameterKind.POSITIONAL

    assert filters.type == "Map<String, dynamic>?"
    assert filters.name == "filters"
    assert filters.kind == ParameterKind.REQUIRED_NAMED


def test_parse_mixed_positional_and_named():
    source = (
        "Future<Either<Failure, void>> updateProfile("
        "String userId, {String? name, required bool notify});"
    )

    method = extract_descriptors(source)[0]

    assert method.is_void_return is True
    assert [(p.name, p.kind) for p in method.parameters] == [
        ("userId", ParameterKind.POSITIONAL),
        ("name", ParameterKind.NAMED),
        ("notify", ParameterKind.REQUIRED_NAMED),
    ]
    assert [p.name for p in method.parameters if p.is_named] == ["name", "notify"]


def test_parse_optional_positional_group():
    method = extract_descriptors(
        "Future<List<User>> listUsers([int page = 1, int size = 20]);"
    )[0]

    assert method.shape == ReturnShape.PLAIN_FUTURE
    assert method.return_type == "List<User>"
    assert [(p.name, p.default) for p in method.parameters] == [
        ("page", "1"),
        ("size", "20"),
    ]
    assert all(p.kind == ParameterKind.OPTIONAL_POSITIONAL for p in method.parameters)


def test_file_order_is_preserved():
    source = """
abstract class AuthRepository {
  Future<Either<Failure, User>> login(String email, String password);
  Future<Either<Failure, void>> logout();
  Stream<User?> watchUser();
  Future<bool> isLoggedIn();
}
"""
    names = [d.name for d in extract_descriptors(source)]

    assert names == ["login", "logout", "watchUser", "isLoggedIn"]


def test_extraction_is_idempotent():
    source = """
  Future<Either<Failure, User>> login(String email, String password);
  Future<Either<Failure, Order>> createOrder({required String productId, int quantity = 1});
  Stream<List<Message>> watch(String roomId);
"""
    assert extract_descriptors(source) == extract_descriptors(source)
