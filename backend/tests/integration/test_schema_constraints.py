"""
Integration tests for the schema's constraints

Foreign keys, NOT NULL columns and the absence of cascade rules, all
enforced by the database itself.
"""
from datetime import date, datetime

import pytest
from sqlalchemy.exc import IntegrityError

from craftlib.db.seed import seed_example_data
from craftlib.models import CraftType, Material, MaterialType, Project, ProjectMaterial, Status, WorkSession
from craftlib.services import material_service, project_service, session_service


class TestSeedData:
    """Test the sample rows load into every table"""

    def test_row_counts(self, seeded_db):
        assert seeded_db.query(Status).count() == 5
        assert seeded_db.query(CraftType).count() == 5
        assert seeded_db.query(MaterialType).count() == 3
        assert seeded_db.query(Material).count() == 20
        assert seeded_db.query(Project).count() == 8
        assert seeded_db.query(WorkSession).count() == 38
        assert seeded_db.query(ProjectMaterial).count() == 8

    def test_seed_is_skipped_when_data_exists(self, seeded_db):
        assert seed_example_data(seeded_db) is False
        assert seeded_db.query(Status).count() == 5

    def test_relationships_resolve(self, seeded_db):
        love_tree = seeded_db.query(Project).filter(Project.name == "Love Tree").one()
        assert love_tree.craft_type.name == "Cross stitch"
        assert love_tree.status.description == "Complete"
        assert len(love_tree.sessions) == 28
        assert {pm.material.material_type.description for pm in love_tree.project_materials} == {"Floss", "Aida"}


class TestForeignKeys:
    """Test references to rows that do not exist are rejected"""

    def test_project_material_with_unknown_material_rejected(self, seeded_db):
        with pytest.raises(IntegrityError):
            project_service.add_project_material(seeded_db, project_id=3, material_id=999, quantity=1)
        assert seeded_db.query(ProjectMaterial).count() == 8

    def test_project_material_with_unknown_project_rejected(self, seeded_db):
        with pytest.raises(IntegrityError):
            project_service.add_project_material(seeded_db, project_id=999, material_id=1)

    def test_project_with_unknown_status_rejected(self, seeded_db):
        with pytest.raises(IntegrityError):
            project_service.create_project(seeded_db, name="Scarf", status_id=99)

    def test_project_with_unknown_craft_type_rejected(self, seeded_db):
        with pytest.raises(IntegrityError):
            project_service.create_project(seeded_db, name="Scarf", status_id=1, craft_type_id=42)

    def test_material_with_unknown_type_rejected(self, seeded_db):
        with pytest.raises(IntegrityError):
            material_service.create_material(seeded_db, material_type_id=9, brand="DMC")

    def test_session_for_unknown_project_rejected(self, seeded_db):
        with pytest.raises(IntegrityError):
            session_service.log_session(seeded_db, project_id=999, start_time=datetime(2024, 1, 1, 10))

    def test_session_is_usable_after_rejection(self, seeded_db):
        """A rejected write leaves the session ready for the next one"""
        with pytest.raises(IntegrityError):
            project_service.add_project_material(seeded_db, project_id=3, material_id=999)
        link = project_service.add_project_material(seeded_db, project_id=3, material_id=19, quantity=1)
        assert link.id is not None


class TestRequiredColumns:
    """Test NOT NULL columns"""

    def test_project_name_required(self, seeded_db):
        with pytest.raises(IntegrityError):
            project_service.create_project(seeded_db, name=None, status_id=1)

    def test_project_status_required(self, seeded_db):
        with pytest.raises(IntegrityError):
            project_service.create_project(seeded_db, name="Scarf", status_id=None)

    def test_session_start_required(self, seeded_db):
        with pytest.raises(IntegrityError):
            session_service.log_session(seeded_db, project_id=1, start_time=None)

    def test_project_dates_optional(self, seeded_db):
        project = project_service.create_project(seeded_db, name="Scarf", status_id=1)
        assert project.acquired_date is None
        assert project.start_date is None
        assert project.end_date is None


class TestDeletes:
    """Test deleting a referenced row fails instead of cascading"""

    def test_delete_project_with_sessions_rejected(self, seeded_db):
        with pytest.raises(IntegrityError):
            project_service.delete_project(seeded_db, 3)
        assert seeded_db.query(Project).filter(Project.id == 3).count() == 1
        assert seeded_db.query(WorkSession).filter(WorkSession.project_id == 3).count() == 28

    def test_delete_status_in_use_rejected(self, seeded_db):
        status = seeded_db.query(Status).filter(Status.description == "Queued").one()
        seeded_db.delete(status)
        with pytest.raises(IntegrityError):
            seeded_db.commit()
        seeded_db.rollback()

    def test_delete_project_without_children(self, seeded_db):
        project_service.delete_project(seeded_db, 8)  # Giraffe Kit
        assert seeded_db.query(Project).filter(Project.id == 8).count() == 0


class TestProjectMaterials:
    """Test the project <-> material association"""

    def test_duplicate_pairs_are_separate_rows(self, seeded_db):
        rows = project_service.list_project_materials(seeded_db, 2)
        assert [(r.material_id, r.quantity) for r in rows] == [(2, 4), (2, 2)]

    def test_adding_existing_pair_adds_a_row(self, seeded_db):
        project_service.add_project_material(seeded_db, project_id=1, material_id=3, quantity=1)
        rows = project_service.list_project_materials(seeded_db, 1)
        assert [(r.material_id, r.quantity) for r in rows] == [(3, 4), (3, 1)]


class TestWrites:
    """Test service writes on an empty database"""

    def test_create_and_update_project(self, db_session):
        db_session.add(Status(description="Queued"))
        db_session.add(CraftType(name="Knitting"))
        db_session.commit()

        project = project_service.create_project(
            db_session, name="Socks", status_id=1, craft_type_id=1, acquired_date=date(2024, 2, 1)
        )
        updated = project_service.update_project(db_session, project.id, {"start_date": date(2024, 2, 3)})

        assert updated.start_date == date(2024, 2, 3)
        assert updated.acquired_date == date(2024, 2, 1)

    def test_update_material_quantity(self, seeded_db):
        material = material_service.update_material(seeded_db, 10, {"quantity": 2})
        assert material.quantity == 2
        assert material.display_name == "DMC 451 Shell Grey"
