import sys
import procmaps


pid = int(sys.argv[1]) if len(sys.argv) > 1 else None
try:
    maps = procmaps.parse_self() if pid is None else procmaps.parse(pid)
except procmaps.ProcMapsException as e:
    print("Error while parsing: {}".format(e))
    sys.exit(1)
for region in maps:
    print("0x{:012x}-0x{:012x} {} {:>10} {}".format(
        region.start_addr, region.end_addr, region.permissions, region.size, region.path or ''))
