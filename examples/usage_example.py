#!/usr/bin/env python3
"""
Usage example — create a job, run it, and poll its status.

Mirrors how client code drives the cloud Jobs API: the job is described
once, triggered by name, and observed through its record. The "render"
step here is a short Python one-liner so the example runs anywhere.

Run:
    python examples/usage_example.py
"""

from __future__ import annotations

import asyncio
import sys

from jobmock import CreateJobRequest, JobDefinition, LocalJobsClient
from jobmock.logging import configure_logging, get_logger

log = get_logger("examples.usage")

RENDER_SCRIPT = (
    "import os; "
    "print('rendering', os.environ['SCENE_FILE'], 'to', os.environ['OUTPUT_PATH'])"
)


async def main() -> int:
    configure_logging(level="INFO", format="console")

    async with LocalJobsClient() as client:
        job = await client.create_job(
            CreateJobRequest(
                job_id="render-blender-scene",
                parent="projects/demo/locations/local",
                job=JobDefinition(
                    command=sys.executable,
                    arguments=["-c", RENDER_SCRIPT],
                    env={"SCENE_FILE": "scene.blend", "OUTPUT_PATH": "./output/"},
                    labels={"team": "rendering"},
                ),
            )
        )
        print(f"Created job: {job.resource_name}")

        # Poll from a second task while the run is in flight
        run = asyncio.create_task(client.run_job(job.name))
        while not run.done():
            current = await client.get_job(job.name)
            print(f"Current status of {job.name}: {current.status.value if current else 'missing'}")
            await asyncio.sleep(0.05)

        finished = run.result()
        print(f"Job {finished.name} finished with status: {finished.status.value}")
        print(finished.output)

        await client.update_job(job.name, "/bin/false")
        print(f"After update: {(await client.get_job(job.name)).status.value}")

        await client.delete_job(job.name)
        print(f"Jobs left: {len(await client.list_jobs())}")

        return 0 if finished.exit_code == 0 else 1


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
