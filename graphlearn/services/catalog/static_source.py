# graphlearn/services/catalog/static_source.py
from __future__ import annotations

from typing import List, Sequence

from graphlearn.domain.entities.material import Material
from graphlearn.domain.enums.material_type import MaterialType


def _pexels(photo_id: int) -> str:
    return (
        f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
        "?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1"
    )


_MATERIALS: List[Material] = [
    Material(
        id="intro-graph-theory",
        title="Вступ до теорії графів",
        description="Вивчіть основні концепції теорії графів, включаючи вершини, ребра та основні властивості графів.",
        type=MaterialType.article,
        category="basics",
        thumbnail_url=_pexels(2280547),
        rating=4.8,
        duration="10 min",
        author="Др. Джейн Сміт",
    ),
    Material(
        id="graph-representations",
        title="Різні способи представлення графів",
        description=(
            "Дослідіть різні методи представлення графів у комп'ютерних науках, включаючи матриці "
            "суміжності, списки суміжності та списки ребер."
        ),
        type=MaterialType.article,
        category="basics",
        thumbnail_url=_pexels(669615),
        rating=4.5,
        duration="15 min",
        author="Проф. Майкл Джонсон",
    ),
    Material(
        id="bfs-algorithm",
        title="Алгоритм пошуку в ширину",
        description=(
            "Розумійте, як працює BFS і як його реалізувати для обходу графа та пошуку найкоротшого "
            "шляху в незважених графах."
        ),
        type=MaterialType.tutorial,
        category="algorithms",
        thumbnail_url=_pexels(577585),
        rating=4.9,
        duration="20 min",
        author="Др. Роберт Чен",
    ),
    Material(
        id="dfs-algorithm",
        title="Алгоритм пошуку в глибину",
        description=(
            "Вивчіть алгоритм DFS для обходу графа, включаючи застосування, такі як виявлення циклів "
            "та топологічне сортування."
        ),
        type=MaterialType.tutorial,
        category="algorithms",
        thumbnail_url=_pexels(3183153),
        rating=4.7,
        duration="18 min",
        author="Др. Роберт Чен",
    ),
    Material(
        id="dijkstra-algorithm",
        title="Алгоритм найкоротшого шляху Дейкстри",
        description="Опануйте алгоритм Дейкстри для пошуку найкоротших шляхів між вузлами у зваженому графі.",
        type=MaterialType.video,
        category="algorithms",
        thumbnail_url=_pexels(7413915),
        video_url="https://www.youtube.com/watch?v=bZkzH5x0SKU&ab_channel=FelixTechTips",
        rating=4.9,
        duration="25 min",
        author="Проф. Сара Вільямс",
    ),
    Material(
        id="prim-algorithm",
        title="Алгоритм мінімального кістякового дерева Прима",
        description=(
            "Вивчіть алгоритм Прима для знаходження мінімальних кістякових дерев у зважених графах, "
            "процес покрокового побудови."
        ),
        type=MaterialType.video,
        category="algorithms",
        thumbnail_url=_pexels(1181677),
        video_url="https://www.youtube.com/watch?v=jsmMtJpPnhU&ab_channel=WilliamFiset",
        rating=4.8,
        duration="28 min",
        author="Др. Марк Томпсон",
    ),
    Material(
        id="kruskal-algorithm",
        title="Алгоритм мінімального кістякового дерева Крускала",
        description=(
            "Опануйте алгоритм Крускала, використовуючи структуру даних Union-Find для ефективного "
            "побудови мінімальних кістякових дерев."
        ),
        type=MaterialType.tutorial,
        category="algorithms",
        thumbnail_url=_pexels(1181263),
        rating=4.7,
        duration="32 min",
        author="Др. Марк Томпсон",
    ),
    Material(
        id="bellman-ford-algorithm",
        title="Алгоритм Белмана-Форда для найкоротших шляхів",
        description=(
            "Розумійте алгоритм Белмана-Форда для пошуку найкоротших шляхів з від'ємними вагами ребер "
            "та виявлення від'ємних циклів."
        ),
        type=MaterialType.video,
        category="algorithms",
        thumbnail_url=_pexels(1181243),
        video_url="https://www.youtube.com/watch?v=lyw4FaxrwHg&ab_channel=WilliamFiset",
        rating=4.6,
        duration="30 min",
        author="Проф. Сара Вільямс",
    ),
    Material(
        id="minimum-spanning-trees",
        title="Мінімальні кістякові дерева",
        description=(
            "Розумійте концепцію мінімальних кістякових дерев та вивчіть алгоритми Прима і Крускала "
            "для їх знаходження."
        ),
        type=MaterialType.article,
        category="algorithms",
        thumbnail_url=_pexels(1261731),
        rating=4.6,
        duration="22 min",
        author="Др. Марк Томпсон",
    ),
    Material(
        id="social-network-analysis",
        title="Застосування теорії графів у соціальних мережах",
        description=(
            "Дослідіть, як теорія графів використовується для аналізу соціальних мереж та виявлення "
            "впливових користувачів і спільнот."
        ),
        type=MaterialType.tutorial,
        category="applications",
        thumbnail_url=_pexels(3183150),
        rating=4.4,
        duration="30 min",
        author="Проф. Емілі Девіс",
    ),
    Material(
        id="graph-coloring",
        title="Проблеми розфарбування графів",
        description=(
            "Вивчіть алгоритми розфарбування графів та їх застосування в плануванні, розподілі "
            "регістрів та розфарбуванні карт."
        ),
        type=MaterialType.article,
        category="advanced",
        thumbnail_url=_pexels(3184292),
        rating=4.2,
        duration="20 min",
        author="Др. Алекс Тернер",
    ),
    Material(
        id="network-flow",
        title="Алгоритми потоків у мережах",
        description=(
            "Розумійте проблеми максимального потоку/мінімального розрізу та алгоритми, такі як "
            "Форд-Фулкерсон та Едмондс-Карп."
        ),
        type=MaterialType.video,
        category="advanced",
        thumbnail_url=_pexels(2881229),
        video_url="https://www.youtube.com/watch?v=oHy3ddI9X3o&ab_channel=BackToBackSWE",
        rating=4.7,
        duration="35 min",
        author="Проф. Девід Вілсон",
    ),
]


class StaticMaterialSource:
    """Bundled graph-theory catalog. Deterministic, no pagination."""

    def __init__(self, materials: Sequence[Material] | None = None) -> None:
        self._materials = list(materials) if materials is not None else list(_MATERIALS)

    def list_materials(self) -> List[Material]:
        # hand out a copy; callers never write into the source
        return list(self._materials)
