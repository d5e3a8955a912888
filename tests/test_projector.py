from __future__ import annotations

from pathlib import Path, PurePosixPath

from projector_core.projector import Projector
from projector_core.schemas import Operation, ProjectorConfig, ProjectorData
from store.repository import LoadStatus


def get_projector(pwd: str, data: ProjectorData) -> Projector:
    return Projector(config=Path(""), pwd=PurePosixPath(pwd), data=data)


class TestProjector:
    def test_get_value(self, sample_data: ProjectorData) -> None:
        proj = get_projector("/baba/baz", sample_data)

        assert proj.get_value("baba") == "baz3"
        assert proj.get_value("femto") == "is_supreme_soy"

    def test_get_value_all(self, sample_data: ProjectorData) -> None:
        proj = get_projector("/baba/baz", sample_data)

        assert dict(proj.get_value_all()) == {"baba": "baz3", "femto": "is_supreme_soy"}

    def test_set_value(self, sample_data: ProjectorData) -> None:
        proj = get_projector("/baba/baz", sample_data)
        proj.set_value("baba", "baz4")
        proj.set_value("femto", "is_not_soy")

        assert proj.get_value("baba") == "baz4"
        assert proj.get_value("femto") == "is_not_soy"

    def test_remove_value(self, sample_data: ProjectorData) -> None:
        proj = get_projector("/baba/baz", sample_data)
        proj.remove_value("baba")
        proj.remove_value("femto")

        assert proj.get_value("baba") == "baz2"
        assert proj.get_value("femto") == "is_supreme_soy"


class TestProjectorPersistence:
    def _config(self, tmp_path: Path, pwd: str = "/baba/baz") -> ProjectorConfig:
        return ProjectorConfig(
            operation=Operation.print_all(),
            pwd=Path(pwd),
            config=tmp_path / "projector" / "projector.json",
        )

    def test_from_config_without_store(self, tmp_path: Path) -> None:
        proj = Projector.from_config(self._config(tmp_path))

        assert proj.load_status is LoadStatus.ABSENT
        assert proj.data == ProjectorData()
        assert proj.get_value("baba") is None

    def test_save_and_reload(self, tmp_path: Path) -> None:
        config = self._config(tmp_path)
        proj = Projector.from_config(config)
        proj.set_value("baba", "baz3")
        proj.save()

        reloaded = Projector.from_config(config)

        assert reloaded.load_status is LoadStatus.LOADED
        assert reloaded.get_value("baba") == "baz3"
        assert reloaded.data.projector == {"/baba/baz": {"baba": "baz3"}}

    def test_reload_from_child_directory(self, tmp_path: Path) -> None:
        proj = Projector.from_config(self._config(tmp_path, "/baba"))
        proj.set_value("baba", "baz2")
        proj.save()

        child = Projector.from_config(self._config(tmp_path, "/baba/baz/deep"))

        assert child.get_value("baba") == "baz2"
