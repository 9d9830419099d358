#!/usr/bin/env python3
"""
Example: Basic usage of Churn Forensics as a Python library
"""

from churn_forensics import Commit, analyze
from churn_forensics.miner import NO_FILE_NAME, FileDetails

# Records as a miner would produce them: one per (revision, file)
commits = [
    Commit("a1", "alice", 1700000000).set_old_path(NO_FILE_NAME).set_new_path("app.py").add_lines(40),
    Commit("b2", "bob", 1700086400).set_old_path("app.py").set_new_path("app.py").add_lines(5).delete_lines(3),
    Commit("b2", "bob", 1700086400).set_old_path("app.py").set_new_path("app.py").add_lines(2),
    Commit("c3", "alice", 1700172800).set_old_path("app.py").set_new_path("main.py").add_lines(1),
]

result = analyze(commits)

for line in result.report.info_messages:
    print(line)
print()

for fs in result.repository.all():
    print(f"{fs.file_name} ({fs.link}): {fs.number_of_commits} commit(s), "
          f"{fs.number_of_authors} author(s), churn {fs.absolute_churn}")

details = FileDetails(result.repository.get("app.py").link, result.repository)
for row in details.rows():
    print(f"  {row.commit_id} {row.author}: +{row.added_lines} -{row.deleted_lines}")
