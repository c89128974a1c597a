from pathlib import Path

from autousecase.app import AutoUseCaseApp
from autousecase.common import L
from autousecase.test_utils import SpyBus, WorkspaceFactory

REPOSITORY_PATH = "lib/features/auth/domain/repositories/auth_repository.dart"


def test_impl_written_next_to_repository(tmp_path, monkeypatch):
    project_root = (
        WorkspaceFactory(tmp_path)
        .with_project_name("shop_app")
        .with_source(
            REPOSITORY_PATH,
            """
            abstract class AuthRepository {
              Future<Either<Failure, User>> login(String email, String password);
              Stream<User?> watchUser();
            }
            """,
        )
        .build()
    )
    app = AutoUseCaseApp(root_path=project_root)
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        result = app.run_impl(Path(REPOSITORY_PATH))

    assert result.success is True
    assert result.method_count == 2
    target = (
        project_root
        / "lib/features/auth/domain/repositories/auth_repository_impl.dart"
    )
    assert result.generated_files == [target]

    content = target.read_text(encoding="utf-8")
    assert "class AuthRepositoryImpl implements AuthRepository {" in content
    assert "final AuthRemoteDataSource authRemoteDataSource;" in content
    assert "import '../datasources/auth_remote_data_source.dart';" in content

    spy_bus.assert_id_called(L.impl.run.data_source, level="info")
    spy_bus.assert_id_called(L.impl.run.complete, level="success")


def test_impl_with_custom_data_source_and_output(tmp_path, monkeypatch):
    project_root = (
        WorkspaceFactory(tmp_path)
        .with_project_name("shop_app")
        .with_source(
            "lib/order_repository.dart", "Future<List<Order>> fetchOrders();"
        )
        .build()
    )
    app = AutoUseCaseApp(root_path=project_root)

    with SpyBus().patch(monkeypatch):
        result = app.run_impl(
            Path("lib/order_repository.dart"),
            output_dir=Path("lib/data/repositories"),
            data_source_name="OrderApi",
        )

    target = project_root / "lib/data/repositories/order_repository_impl.dart"
    assert result.generated_files == [target]
    content = target.read_text(encoding="utf-8")
    assert "class OrderRepositoryImpl implements OrderRepository {" in content
    assert "return orderApi.fetchOrders();" in content
    assert "dartz" not in content
