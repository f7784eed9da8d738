from typing import List

def read_tsv(path: str) -> List[List[int]]:
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    return rows

def write_tsv(rows: List[List[int]], path: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        for r in rows:
            f.write("\t".join(str(int(v)) for v in r))
            f.write("\n")
