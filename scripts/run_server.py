# scripts/run_server.py

import asyncio
from datetime import datetime, timedelta, UTC

import typer
import uvicorn

from labtrack.core.store import EntityStore, store
from labtrack.domains.eqp import crud as eqp_crud
from labtrack.domains.eqp import schemas as eqp_schemas
from labtrack.domains.inv import crud as inv_crud
from labtrack.domains.inv import schemas as inv_schemas
from labtrack.domains.lims import crud as lims_crud
from labtrack.domains.lims import schemas as lims_schemas
from labtrack.domains.tsk import crud as tsk_crud
from labtrack.domains.tsk import schemas as tsk_schemas

cli = typer.Typer()


async def seed_demo_data(db: EntityStore) -> None:
    """
    화면 확인용 예시 데이터를 CRUD 계층을 통해 저장소에 넣습니다.
    (교정 이력도 장비 생성 시 자동으로 함께 기록됩니다)
    """
    now = datetime.now(UTC)

    await eqp_crud.tool.create(db, obj_in=eqp_schemas.ToolCreate(
        code="BAL-001", name="Digital balance", brand="Mettler Toledo", serial_number="B123456",
        location="Lab 1", last_calibration=now - timedelta(days=340),
        next_calibration=now + timedelta(days=25), calibration_result="pass",
    ))
    await eqp_crud.tool.create(db, obj_in=eqp_schemas.ToolCreate(
        code="PHM-001", name="pH meter", brand="Horiba", serial_number="P998877",
        location="Lab 2", last_calibration=now - timedelta(days=400),
        next_calibration=now - timedelta(days=35), calibration_result="pass",
    ))
    await eqp_crud.glassware.create(db, obj_in=eqp_schemas.GlasswareCreate(
        code="VF-100-01", type="Volumetric flask 100 mL", glass_class="A", lot_number="L2301",
        last_calibration=now - timedelta(days=100), next_calibration=now + timedelta(days=265),
        calibration_result="pass",
    ))
    await inv_crud.chemical.create(db, obj_in=inv_schemas.ChemicalCreate(
        chemical_no="CH-0001", name="Sodium hydroxide", cas_no="1310-73-2", grade="AR",
        category="qa", expiry_date=now + timedelta(days=20),
    ))
    await lims_crud.qa_sample.create(db, obj_in=lims_schemas.QaSampleCreate(
        request_no="QA-0001", received_time="09:30", received_date=now, due_date=now + timedelta(days=7),
        contact_person="J. Doe", phone="000-0000", email="qa@example.com", company_name="Example Co.",
        delivery_method="pickup", storage="room_temp", post_testing="dispose", condition="normal",
        samples=[lims_schemas.SampleItem(
            sample_no="S-1", names=["Lot A"],
            item_tests=[lims_schemas.ItemTest(test_name="pH", specification="6.0-8.0")],
        )],
    ))
    await tsk_crud.task.create(db, obj_in=tsk_schemas.TaskCreate(
        title="Annual calibration plan", responsible="Lab manager",
        subtasks=[tsk_schemas.Subtask(title="Collect quotations"), tsk_schemas.Subtask(title="Schedule vendor")],
    ))


@cli.command()
def main(
    host: str = typer.Option("127.0.0.1", "--host", help="바인딩할 호스트 주소입니다."),
    port: int = typer.Option(8000, "--port", "-p", help="바인딩할 포트입니다."),
    reload: bool = typer.Option(False, "--reload", help="코드 변경 시 자동 재시작 (개발용)."),
    seed_demo: bool = typer.Option(False, "--seed-demo", help="예시 데이터를 넣은 상태로 시작합니다."),
):
    """
    LabTrack API 서버를 실행합니다.
    """
    if seed_demo:
        if reload:
            # reload 모드에서는 별도 프로세스가 앱을 다시 임포트하므로 메모리 데이터가 공유되지 않습니다.
            print("오류: --seed-demo는 --reload와 함께 사용할 수 없습니다.")
            raise typer.Abort()
        asyncio.run(seed_demo_data(store))
        print("예시 데이터를 저장소에 추가했습니다.")

    if reload:
        uvicorn.run("labtrack.main:app", host=host, port=port, reload=True)
    else:
        from labtrack.main import app
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    cli()
