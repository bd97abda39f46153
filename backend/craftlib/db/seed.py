"""
Sample data for every table

Used by scripts/seed_example_data.py, by SEED_ON_STARTUP, and as the test
fixture. Rows are inserted parents first; ids are assigned by the store,
so the foreign keys below rely on inserting into an empty database.
"""
from datetime import date, datetime

from sqlalchemy.orm import Session

from craftlib.logging_config import get_logger
from craftlib.models import (
    CraftType,
    Material,
    MaterialType,
    Project,
    ProjectMaterial,
    Status,
    WorkSession,
)

logger = get_logger(__name__)


STATUSES = ["Queued", "In progress", "On hold", "Abandoned", "Complete"]

CRAFT_TYPES = ["Crochet", "Knitting", "Cross stitch", "Embroidery", "Tapestry"]

MATERIAL_TYPES = [
    ("Yarn", "meters"),
    ("Floss", "skeins"),
    ("Aida", "sq cm"),
]

# (type, brand, brand code, brand weight, colour, qty, weight, length, width)
MATERIALS = [
    (1, "Women's Institute", None, "DK", "Red", 3, 100, 250, None),
    (1, "James C Brett", None, "DK", "Summer Days Aurora", 4, 100, 345, None),
    (1, "Patons", "Fairytale Fab", "Aran", "Orchid", 2, 50, 100, None),
    (2, "DMC", "White", None, "White", 3, None, None, None),
    (2, "DMC", "310", None, "Black", 5, None, None, None),
    (2, "DMC", "311", None, "Blue - Medium", 1, None, None, None),
    (2, "DMC", "29", None, "Eggplant", 2, None, None, None),
    (2, "DMC", "150", None, "Red - Bright", 5, None, None, None),
    (2, "DMC", "699", None, "Green", 2, None, None, None),
    (2, "DMC", "451", None, "Shell Grey", 0, None, None, None),
    (2, "DMC", "823", None, "Blue - Dark", 0, None, None, None),
    (2, "DMC", "838", None, "Beige Brown - Very Dark", 1, None, None, None),
    (2, "DMC", "S336", "Satin", "Blue", 3, None, None, None),
    (2, "DMC", "S602", "Satin", "Cranberry", 0, None, None, None),
    (2, "DMC", "E3852", "Metallic", "Gold", 1, None, None, None),
    (2, "DMC", "E990", "Neon", "Green", 3, None, None, None),
    (2, "DMC", "67", "Variegated", "Baby Blue", 0, None, None, None),
    (3, "Hobbycraft", None, "14 ct", "White", 1, None, 30, 40),
    (3, "Hobbycraft", None, "16 ct", "Ivory", 1, None, 76, 91),
    (3, "Hobbycraft", None, "14 ct", "Black", 1, None, 30, 46),
]

# (name, craft type, description, link, acquired, started, ended, status)
PROJECTS = [
    ("Four Hour Chunky Sweater", 1, "crochet top",
     "https://hearthookhome.com/four-hour-fall-sweater-free-crochet-pattern/",
     None, date(2023, 10, 16), None, 2),
    ("Basic V-Neck Sweater", 1, None,
     "https://hearthookhome.com/basic-v-neck-sweater-free-crochet-pattern/",
     None, None, None, 1),
    ("Love Tree", 3, "Bothy Threads", None,
     date(2016, 11, 1), date(2016, 12, 1), date(2023, 6, 1), 5),
    ("Moira Blackburn Three Things Sampler Kit", 3, None, None,
     date(2020, 8, 1), date(2020, 11, 24), None, 2),
    ("Dumbo", 3, "Disney 100 Dumbo Mini Cross Stitch Kit", None,
     date(2023, 5, 1), date(2023, 5, 2), date(2023, 5, 4), 5),
    ("Feasting Frenzy", 3, "Dimensions Feasting Frenzy Counted Cross Stitch Kit", None,
     date(2022, 12, 25), date(2022, 12, 25), None, 4),
    ("Mistletoe", 4, "Mistletoe mini embroidery kit", None,
     None, date(2023, 10, 1), None, 1),
    ("Giraffe Kit", 4, "DMC Giraffe Printed Embroidery Kit", None,
     date(2023, 10, 1), None, None, 1),
]

# (project, start, end) as "YYYY-MM-DD HH:MM"
SESSIONS = [
    (1, "2023-10-16 20:00", "2023-10-16 23:00"),
    (1, "2023-10-17 10:30", "2023-10-17 14:00"),
    (1, "2023-10-17 15:00", "2023-10-17 18:00"),
    (3, "2016-11-02 19:00", "2016-11-02 23:00"),
    (3, "2016-11-03 18:00", "2016-11-03 23:00"),
    (3, "2016-11-04 19:00", "2016-11-04 23:00"),
    (3, "2016-11-06 19:00", "2016-11-06 22:00"),
    (3, "2016-11-07 15:00", "2016-11-07 18:00"),
    (3, "2016-11-10 19:00", "2016-11-10 23:00"),
    (3, "2016-11-11 18:00", "2016-11-11 20:00"),
    (3, "2016-11-25 19:00", "2016-11-25 21:00"),
    (3, "2016-11-26 19:00", "2016-11-26 20:00"),
    (3, "2016-12-02 19:00", "2016-12-02 20:00"),
    (3, "2016-12-03 19:00", "2016-12-03 20:00"),
    (3, "2016-12-04 19:00", "2016-12-04 21:00"),
    (3, "2017-02-02 19:00", "2017-02-02 20:00"),
    (3, "2017-02-03 19:00", "2017-02-03 21:00"),
    (3, "2017-03-10 19:00", "2017-03-10 23:00"),
    (3, "2017-08-25 19:00", "2017-08-25 20:00"),
    (3, "2018-11-08 19:00", "2018-11-08 22:00"),
    (3, "2018-11-09 19:00", "2018-11-09 22:00"),
    (3, "2018-11-10 19:00", "2018-11-10 22:00"),
    (3, "2020-04-14 10:00", "2020-04-14 16:00"),
    (3, "2020-04-15 10:00", "2020-04-15 16:00"),
    (3, "2020-04-16 10:00", "2020-04-16 20:00"),
    (3, "2021-10-05 10:00", "2021-10-05 12:00"),
    (3, "2021-10-06 10:00", "2021-10-06 12:00"),
    (3, "2023-05-25 18:00", "2023-05-25 23:00"),
    (3, "2023-05-26 18:00", "2023-05-26 23:00"),
    (3, "2023-05-27 18:00", "2023-05-27 23:00"),
    (3, "2023-06-01 18:00", "2023-06-01 23:00"),
    (4, "2020-11-24 19:00", "2020-11-24 21:00"),
    (4, "2020-11-25 19:00", "2020-11-25 21:00"),
    (4, "2020-11-30 19:00", "2020-11-30 21:00"),
    (5, "2023-05-03 19:00", "2023-05-03 21:00"),
    (5, "2023-05-04 19:00", "2023-05-04 21:00"),
    (6, "2022-12-25 18:00", "2022-12-25 19:00"),
    (7, "2023-10-02 18:00", "2023-10-02 19:00"),
]

# (project, material, quantity); project 2 lists material 2 twice
PROJECT_MATERIALS = [
    (1, 3, 4),
    (2, 2, 4),
    (2, 2, 2),
    (3, 4, 2),
    (3, 5, 5),
    (3, 11, 1),
    (3, 12, 1),
    (3, 18, 1),
]


def _parse(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d %H:%M")


def seed_example_data(db: Session) -> bool:
    """
    Insert the sample rows.

    Returns False without writing anything if statuses already exist.
    """
    if db.query(Status).first() is not None:
        logger.info("Sample data already present, skipping seed")
        return False

    # Each group is flushed before the next so parent ids exist
    db.add_all(Status(description=d) for d in STATUSES)
    db.add_all(CraftType(name=n) for n in CRAFT_TYPES)
    db.add_all(MaterialType(description=d, units=u) for d, u in MATERIAL_TYPES)
    db.flush()

    db.add_all(
        Material(
            material_type_id=mt, brand=brand, brand_code=code, brand_weight=bw,
            colour=colour, quantity=qty, weight=weight, length=length, width=width,
        )
        for mt, brand, code, bw, colour, qty, weight, length, width in MATERIALS
    )
    db.add_all(
        Project(
            name=name, craft_type_id=craft, description=desc, link=link,
            acquired_date=acquired, start_date=started, end_date=ended, status_id=status,
        )
        for name, craft, desc, link, acquired, started, ended, status in PROJECTS
    )
    db.flush()

    db.add_all(
        WorkSession(project_id=pid, start_time=_parse(start), end_time=_parse(end))
        for pid, start, end in SESSIONS
    )
    db.add_all(
        ProjectMaterial(project_id=pid, material_id=mid, quantity=qty)
        for pid, mid, qty in PROJECT_MATERIALS
    )
    db.commit()

    logger.info(
        "Sample data seeded",
        extra={
            "projects": len(PROJECTS),
            "materials": len(MATERIALS),
            "sessions": len(SESSIONS),
        },
    )
    return True
