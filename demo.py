"""
EgoScript Compiler Demo

Compiles a small character script, shows the diagnostics and the
disassembled instruction words, and packs them for the interpreter.
"""
import sys
sys.path.insert(0, '.')
from api.context import Context

SCRIPT = '''\
// Guard: wander until attacked, then fight back
IfSpawned
  tmpargument = STATEWANDER
  SetState
IfAttacked
  SetTargetToWhoeverAttacked
  IfTargetIsAlive
    tmpargument = STATECOMBAT
    SetState
    tmpx = targetx + 64
    tmpy = targety - 64
  "this line is not a statement"
End
'''

def main():
    print('=== EgoScript Compiler Demo ===')
    print()

    ctx = Context(debug=True)
    script = ctx.compile(SCRIPT, name='guard.txt')
    print()

    print(script.disassemble())
    print()

    words = script.words
    print(f'Packed {len(words)} words: {" ".join(f"{w:08x}" for w in words[:8])} ...')
    print('Compile ' + ('succeeded' if script.ok else 'reported errors; the host would load its default script'))


if __name__ == '__main__':
    main()
