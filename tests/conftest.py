"""Pytest fixtures for compdocs tests."""

import json

import pytest
from compdocs.api import create_app
from compdocs.lookup import ComponentLookup
from compdocs.store import ComponentStore

BUTTON_DOC = """\
:: BASE_DOC ::

## API

### Button Props

| 名称 | 类型 | 默认值 | 说明 | 必传 |
| -- | -- | -- | -- | -- |
| theme | string | default | 按钮风格 | N |
"""

MULTI_DOC = """\
## API

### Input Props

名称 | 类型 | 默认值 | 说明 | 必传
-- | -- | -- | -- | --
value | String / Number | - | 输入框的值 | N
placeholder | String | undefined | 占位符 | N

### Input Events

名称 | 参数 | 描述
-- | -- | --
change | `(value: string)` | 输入框值发生变化时触发

### InputInstanceFunctions 组件实例方法

名称 | 参数 | 返回值 | 描述
-- | -- | -- | --
focus | - | - | 获取焦点

### InputNumber Props

名称 | 类型 | 默认值 | 说明 | 必传
-- | -- | -- | -- | --
step | Number | 1 | 步长 | N
max | Number | Infinity | 最大值 | Y

### InputNumber Events

名称 | 参数 | 描述
-- | -- | --
blur | `(value: number \\| string)` | 失去焦点时触发
"""


class StoreTestHelpers:
    """Direct file access for store and lookup tests."""

    def __init__(self, root):
        self.root = root
        self.data_dir = root / "src" / "data" / "components"
        self.index_path = self.data_dir / "index.json"

    def read_index(self) -> dict:
        return json.loads(self.index_path.read_text(encoding="utf-8"))

    def write_index(self, data) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            self.index_path.write_text(data, encoding="utf-8")
        else:
            self.index_path.write_text(json.dumps(data), encoding="utf-8")

    def read_component(self, file: str) -> dict:
        return json.loads((self.root / file).read_text(encoding="utf-8"))

    def write_component(self, file: str, data) -> None:
        path = self.root / file
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def project_root(tmp_path):
    """An empty project root for the store and lookup."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def store(project_root):
    return ComponentStore(root=project_root)


@pytest.fixture
def lookup(project_root):
    return ComponentLookup(root=project_root)


@pytest.fixture
def test_helpers(project_root):
    """
    Test helper utilities for direct file access.

    Example:
        def test_indexed(store, test_helpers):
            store.save(ComponentDoc(component="Button"))
            assert test_helpers.read_index()["components"][0]["name"] == "Button"
    """
    return StoreTestHelpers(project_root)


@pytest.fixture
def client(lookup):
    """Flask test client bound to the project root's store."""
    app = create_app(lookup)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def button_doc():
    return BUTTON_DOC


@pytest.fixture
def multi_doc():
    return MULTI_DOC
