# Заполнение таблицы projects демонстрационными данными.
# Запуск из корня проекта: python scripts/seed_projects.py

import asyncio
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv
load_dotenv(dotenv_path=project_root / ".env", encoding="utf-8-sig")

SAMPLE_PROJECTS = ["Project 1", "Project 2", "Project 3"]


async def main():
    from projects_api.db.session import async_session_factory
    from projects_api.services.projects_service import ProjectsService

    service = ProjectsService()
    async with async_session_factory() as session:
        existing = {p.name for p in await service.find_all(session)}
        created = []
        for name in SAMPLE_PROJECTS:
            # повторный запуск не плодит дубликаты
            if name in existing:
                continue
            project = await service.create(session, {"name": name})
            created.append(project.id)
        total = len(await service.find_all(session))
    print(f"OK: created {len(created)} project(s) {created}, total in DB: {total}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except Exception as e:
        print("FAIL:", e, file=sys.stderr)
        sys.exit(1)
