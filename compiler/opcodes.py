"""
EgoScript Opcode Data

The static list the symbol table is built from: script functions, named
constants, predefined variables and operators. Function and variable
opcode numbers are their position in the respective list.
"""

from enum import IntEnum


# Script functions; the opcode is the index.
FUNCTION_NAMES = (
    "IfSpawned",  # 0
    "IfTimeOut",  # 1
    "IfAtWaypoint",  # 2
    "IfAtLastWaypoint",  # 3
    "IfAttacked",  # 4
    "IfBumped",  # 5
    "IfSignaled",  # 6
    "IfCalledForHelp",  # 7
    "SetContent",  # 8
    "IfKilled",  # 9
    "IfTargetKilled",  # 10
    "ClearWaypoints",  # 11
    "AddWaypoint",  # 12
    "FindPath",  # 13
    "Compass",  # 14
    "GetTargetArmorPrice",  # 15
    "SetTime",  # 16
    "GetContent",  # 17
    "JoinTargetTeam",  # 18
    "SetTargetToNearbyEnemy",  # 19
    "SetTargetToTargetLeftHand",  # 20
    "SetTargetToTargetRightHand",  # 21
    "SetTargetToWhoeverAttacked",  # 22
    "SetTargetToWhoeverBumped",  # 23
    "SetTargetToWhoeverCalledForHelp",  # 24
    "SetTargetToOldTarget",  # 25
    "SetTurnModeToVelocity",  # 26
    "SetTurnModeToWatch",  # 27
    "SetTurnModeToSpin",  # 28
    "SetBumpHeight",  # 29
    "IfTargetHasID",  # 30
    "IfTargetHasItemID",  # 31
    "IfTargetHoldingItemID",  # 32
    "IfTargetHasSkillID",  # 33
    "Else",  # 34
    "Run",  # 35
    "Walk",  # 36
    "Sneak",  # 37
    "DoAction",  # 38
    "KeepAction",  # 39
    "SignalTeam",  # 40
    "DropWeapons",  # 41
    "TargetDoAction",  # 42
    "OpenPassage",  # 43
    "ClosePassage",  # 44
    "IfPassageOpen",  # 45
    "GoPoof",  # 46
    "CostTargetItemID",  # 47
    "DoActionOverride",  # 48
    "IfHealed",  # 49
    "DisplayMessage",  # 50
    "CallForHelp",  # 51
    "AddIDSZ",  # 52
    "End",  # 53
    "SetState",  # 54
    "GetState",  # 55
    "IfStateIs",  # 56
    "IfTargetCanOpenStuff",  # 57
    "IfGrabbed",  # 58
    "IfDropped",  # 59
    "SetTargetToWhoeverIsHolding",  # 60
    "DamageTarget",  # 61
    "IfXIsLessThanY",  # 62
    "SetWeatherTime",  # 63
    "GetBumpHeight",  # 64
    "IfReaffirmed",  # 65
    "UnkeepAction",  # 66
    "IfTargetIsOnOtherTeam",  # 67
    "IfTargetIsOnHatedTeam",  # 68
    "PressLatchButton",  # 69
    "SetTargetToTargetOfLeader",  # 70
    "IfLeaderKilled",  # 71
    "BecomeLeader",  # 72
    "ChangeTargetArmor",  # 73
    "GiveMoneyToTarget",  # 74
    "DropKeys",  # 75
    "IfLeaderIsAlive",  # 76
    "IfTargetIsOldTarget",  # 77
    "SetTargetToLeader",  # 78
    "SpawnCharacter",  # 79
    "RespawnCharacter",  # 80
    "ChangeTile",  # 81
    "IfUsed",  # 82
    "DropMoney",  # 83
    "SetOldTarget",  # 84
    "DetachFromHolder",  # 85
    "IfTargetHasVulnerabilityID",  # 86
    "CleanUp",  # 87
    "IfCleanedUp",  # 88
    "IfSitting",  # 89
    "IfTargetIsHurt",  # 90
    "IfTargetIsAPlayer",  # 91
    "PlaySound",  # 92
    "SpawnParticle",  # 93
    "IfTargetIsAlive",  # 94
    "Stop",  # 95
    "DisaffirmCharacter",  # 96
    "ReaffirmCharacter",  # 97
    "IfTargetIsSelf",  # 98
    "IfTargetIsMale",  # 99
    "IfTargetIsFemale",  # 100
    "SetTargetToSelf",  # 101
    "SetTargetToRider",  # 102
    "GetAttackTurn",  # 103
    "GetDamageType",  # 104
    "BecomeSpell",  # 105
    "BecomeSpellbook",  # 106
    "IfScoredAHit",  # 107
    "IfDisaffirmed",  # 108
    "DecodeOrder",  # 109
    "SetTargetToWhoeverWasHit",  # 110
    "SetTargetToWideEnemy",  # 111
    "IfChanged",  # 112
    "IfInWater",  # 113
    "IfBored",  # 114
    "IfTooMuchBaggage",  # 115
    "IfGrogged",  # 116
    "IfDazed",  # 117
    "IfTargetHasSpecialID",  # 118
    "PressTargetLatchButton",  # 119
    "IfInvisible",  # 120
    "IfArmorIs",  # 121
    "GetTargetGrogTime",  # 122
    "GetTargetDazeTime",  # 123
    "SetDamageType",  # 124
    "SetWaterLevel",  # 125
    "EnchantTarget",  # 126
    "EnchantChild",  # 127
    "TeleportTarget",  # 128
    "GiveExperienceToTarget",  # 129
    "IncreaseAmmo",  # 130
    "UnkurseTarget",  # 131
    "GiveExperienceToTargetTeam",  # 132
    "IfUnarmed",  # 133
    "RestockTargetAmmoIDAll",  # 134
    "RestockTargetAmmoIDFirst",  # 135
    "FlashTarget",  # 136
    "SetRedShift",  # 137
    "SetGreenShift",  # 138
    "SetBlueShift",  # 139
    "SetLight",  # 140
    "SetAlpha",  # 141
    "IfHitFromBehind",  # 142
    "IfHitFromFront",  # 143
    "IfHitFromLeft",  # 144
    "IfHitFromRight",  # 145
    "IfTargetIsOnSameTeam",  # 146
    "KillTarget",  # 147
    "UndoEnchant",  # 148
    "GetWaterLevel",  # 149
    "CostTargetMana",  # 150
    "IfTargetHasAnyID",  # 151
    "SetBumpSize",  # 152
    "IfNotDropped",  # 153
    "IfYIsLessThanX",  # 154
    "SetFlyHeight",  # 155
    "IfBlocked",  # 156
    "IfTargetIsDefending",  # 157
    "IfTargetIsAttacking",  # 158
    "IfStateIs0",  # 159
    "IfStateIs1",  # 160
    "IfStateIs2",  # 161
    "IfStateIs3",  # 162
    "IfStateIs4",  # 163
    "IfStateIs5",  # 164
    "IfStateIs6",  # 165
    "IfStateIs7",  # 166
    "IfContentIs",  # 167
    "SetTurnModeToWatchTarget",  # 168
    "IfStateIsNot",  # 169
    "IfXIsEqualToY",  # 170
    "DisplayDebugMessage",  # 171
    "BlackTarget",  # 172
    "DisplayMessageNear",  # 173
    "IfHitGround",  # 174
    "IfNameIsKnown",  # 175
    "IfUsageIsKnown",  # 176
    "IfHoldingItemID",  # 177
    "IfHoldingRangedWeapon",  # 178
    "IfHoldingMeleeWeapon",  # 179
    "IfHoldingShield",  # 180
    "IfKursed",  # 181
    "IfTargetIsKursed",  # 182
    "IfTargetIsDressedUp",  # 183
    "IfOverWater",  # 184
    "IfThrown",  # 185
    "MakeNameKnown",  # 186
    "MakeUsageKnown",  # 187
    "StopTargetMovement",  # 188
    "SetXY",  # 189
    "GetXY",  # 190
    "AddXY",  # 191
    "MakeAmmoKnown",  # 192
    "SpawnAttachedParticle",  # 193
    "SpawnExactParticle",  # 194
    "AccelerateTarget",  # 195
    "IfDistanceIsMoreThanTurn",  # 196
    "IfCrushed",  # 197
    "MakeCrushValid",  # 198
    "SetTargetToLowestTarget",  # 199
    "IfNotPutAway",  # 200
    "IfTakenOut",  # 201
    "IfAmmoOut",  # 202
    "PlaySoundLooped",  # 203
    "StopSoundLoop",  # 204
    "HealSelf",  # 205
    "Equip",  # 206
    "IfTargetHasItemIDEquipped",  # 207
    "SetOwnerToTarget",  # 208
    "SetTargetToOwner",  # 209
    "SetFrame",  # 210
    "BreakPassage",  # 211
    "SetReloadTime",  # 212
    "SetTargetToWideBlahID",  # 213
    "PoofTarget",  # 214
    "ChildDoActionOverride",  # 215
    "SpawnPoof",  # 216
    "SetSpeedPercent",  # 217
    "SetChildState",  # 218
    "SpawnAttachedSizedParticle",  # 219
    "ChangeArmor",  # 220
    "ShowTimer",  # 221
    "IfFacingTarget",  # 222
    "PlaySoundVolume",  # 223
    "SpawnAttachedFacedParticle",  # 224
    "IfStateIsOdd",  # 225
    "SetTargetToDistantEnemy",  # 226
    "Teleport",  # 227
    "GiveStrengthToTarget",  # 228
    "GiveWisdomToTarget",  # 229
    "GiveIntelligenceToTarget",  # 230
    "GiveDexterityToTarget",  # 231
    "GiveLifeToTarget",  # 232
    "GiveManaToTarget",  # 233
    "ShowMap",  # 234
    "ShowYouAreHere",  # 235
    "ShowBlipXY",  # 236
    "HealTarget",  # 237
    "PumpTarget",  # 238
    "CostAmmo",  # 239
    "MakeSimilarNamesKnown",  # 240
    "SpawnAttachedHolderParticle",  # 241
    "SetTargetReloadTime",  # 242
    "SetFogLevel",  # 243
    "GetFogLevel",  # 244
    "SetFogTAD",  # 245
    "SetFogBottomLevel",  # 246
    "GetFogBottomLevel",  # 247
    "CorrectActionForHand",  # 248
    "IfTargetIsMounted",  # 249
    "SparkleIcon",  # 250
    "UnsparkleIcon",  # 251
    "GetTileXY",  # 252
    "SetTileXY",  # 253
    "SetShadowSize",  # 254
    "SignalTarget",  # 255
    "SetTargetToWhoeverIsInPassage",  # 256
    "IfCharacterWasABook",  # 257
    "SetEnchantBoostValues",  # 258
    "SpawnCharacterXYZ",  # 259
    "SpawnExactCharacterXYZ",  # 260
    "ChangeTargetClass",  # 261
    "PlayFullSound",  # 262
    "SpawnExactChaseParticle",  # 263
    "EncodeOrder",  # 264
    "SignalSpecialID",  # 265
    "UnkurseTargetInventory",  # 266
    "IfTargetIsSneaking",  # 267
    "DropItems",  # 268
    "RespawnTarget",  # 269
    "TargetDoActionSetFrame",  # 270
    "IfTargetCanSeeInvisible",  # 271
    "SetTargetToNearestBlahID",  # 272
    "SetTargetToNearestEnemy",  # 273
    "SetTargetToNearestFriend",  # 274
    "SetTargetToNearestLifeform",  # 275
    "FlashPassage",  # 276
    "FindTileInPassage",  # 277
    "IfHeldInLeftSaddle",  # 278
    "NotAnItem",  # 279
    "SetChildAmmo",  # 280
    "IfHitVulnerable",  # 281
    "IfTargetIsFlying",  # 282
    "IdentifyTarget",  # 283
    "BeatModule",  # 284
    "EndModule",  # 285
    "DisableExport",  # 286
    "EnableExport",  # 287
    "GetTargetState",  # 288
    "SetSpeech",  # 289
    "SetMoveSpeech",  # 290
    "SetSecondMoveSpeech",  # 291
    "SetAttackSpeech",  # 292
    "SetAssistSpeech",  # 293
    "SetTerrainSpeech",  # 294
    "SetSelectSpeech",  # 295
    "ClearEndText",  # 296
    "AddEndText",  # 297
    "PlayMusic",  # 298
    "SetMusicPassage",  # 299
    "MakeCrushInvalid",  # 300
    "StopMusic",  # 301
    "FlashVariable",  # 302
    "AccelerateUp",  # 303
    "FlashVariableHeight",  # 304
    "SetDamageTime",  # 305
    "IfStateIs8",  # 306
    "IfStateIs9",  # 307
    "IfStateIs10",  # 308
    "IfStateIs11",  # 309
    "IfStateIs12",  # 310
    "IfStateIs13",  # 311
    "IfStateIs14",  # 312
    "IfStateIs15",  # 313
    "IfTargetIsAMount",  # 314
    "IfTargetIsAPlatform",  # 315
    "AddStat",  # 316
    "DisenchantTarget",  # 317
    "DisenchantAll",  # 318
    "SetVolumeNearestTeammate",  # 319
    "AddShopPassage",  # 320
    "TargetPayForArmor",  # 321
    "JoinEvilTeam",  # 322
    "JoinNullTeam",  # 323
    "JoinGoodTeam",  # 324
    "PitsKill",  # 325
    "SetTargetToPassageID",  # 326
    "MakeNameUnknown",  # 327
    "SpawnExactParticleEndSpawn",  # 328
    "SpawnPoofSpeedSpacingDamage",  # 329
    "GiveExperienceToGoodTeam",  # 330
    "DoNothing",  # 331
    "DazeTarget",  # 332
    "GrogTarget",  # 333
    "IfEquipped",  # 334
    "DropTargetMoney",  # 335
    "GetTargetContent",  # 336
    "DropTargetKeys",  # 337
    "JoinTeam",  # 338
    "TargetJoinTeam",  # 339
    "ClearMusicPassage",  # 340
    "AddQuest",  # 341
    "BeatQuest",  # 342
    "IfTargetHasQuest",  # 343
    "SetQuestLevel",  # 344
    "IfTargetHasNotFullMana",  # 345
    "IfDoingAction",  # 346
    "IfOperatorIsLinux",  # 347
    "IfTargetIsOwner",  # 348
    "SetCameraSwing",  # 349
    "EnableRespawn",  # 350
    "DisableRespawn",  # 351
    "IfButtonPressed",  # 352
)

FUNCTION_END = FUNCTION_NAMES.index("End")


# Named constants: (name, value).
CONSTANTS = (
    ("BLAHDEAD", 1),
    ("BLAHENEMIES", 2),
    ("BLAHFRIENDS", 4),
    ("BLAHITEMS", 8),
    ("BLAHINVERTID", 16),
    ("BLAHPLAYERS", 32),
    ("BLAHSKILL", 64),
    ("BLAHQUEST", 128),
    ("STATEPARRY", 0),
    ("STATEWANDER", 1),
    ("STATEGUARD", 2),
    ("STATEFOLLOW", 3),
    ("STATESURROUND", 4),
    ("STATERETREAT", 5),
    ("STATECHARGE", 6),
    ("STATECOMBAT", 7),
    ("GRIPONLY", 4),
    ("GRIPLEFT", 4),
    ("GRIPRIGHT", 8),
    ("SPAWNORIGIN", 0),
    ("SPAWNLAST", 1),
    ("LATCHLEFT", 0),
    ("LATCHRIGHT", 1),
    ("LATCHJUMP", 2),
    ("LATCHALTLEFT", 3),
    ("LATCHALTRIGHT", 4),
    ("LATCHPACKLEFT", 5),
    ("LATCHPACKRIGHT", 6),
    ("DAMAGESLASH", 0),
    ("DAMAGECRUSH", 1),
    ("DAMAGEPOKE", 2),
    ("DAMAGEHOLY", 3),
    ("DAMAGEEVIL", 4),
    ("DAMAGEFIRE", 5),
    ("DAMAGEICE", 6),
    ("DAMAGEZAP", 7),
    ("ACTIONDA", 0),
    ("ACTIONDB", 1),
    ("ACTIONDC", 2),
    ("ACTIONDD", 3),
    ("ACTIONUA", 4),
    ("ACTIONUB", 5),
    ("ACTIONUC", 6),
    ("ACTIONUD", 7),
    ("ACTIONTA", 8),
    ("ACTIONTB", 9),
    ("ACTIONTC", 10),
    ("ACTIONTD", 11),
    ("ACTIONCA", 12),
    ("ACTIONCB", 13),
    ("ACTIONCC", 14),
    ("ACTIONCD", 15),
    ("ACTIONSA", 16),
    ("ACTIONSB", 17),
    ("ACTIONSC", 18),
    ("ACTIONSD", 19),
    ("ACTIONBA", 20),
    ("ACTIONBB", 21),
    ("ACTIONBC", 22),
    ("ACTIONBD", 23),
    ("ACTIONLA", 24),
    ("ACTIONLB", 25),
    ("ACTIONLC", 26),
    ("ACTIONLD", 27),
    ("ACTIONXA", 28),
    ("ACTIONXB", 29),
    ("ACTIONXC", 30),
    ("ACTIONXD", 31),
    ("ACTIONFA", 32),
    ("ACTIONFB", 33),
    ("ACTIONFC", 34),
    ("ACTIONFD", 35),
    ("ACTIONPA", 36),
    ("ACTIONPB", 37),
    ("ACTIONPC", 38),
    ("ACTIONPD", 39),
    ("ACTIONEA", 40),
    ("ACTIONEB", 41),
    ("ACTIONRA", 42),
    ("ACTIONZA", 43),
    ("ACTIONZB", 44),
    ("ACTIONZC", 45),
    ("ACTIONZD", 46),
    ("ACTIONWA", 47),
    ("ACTIONWB", 48),
    ("ACTIONWC", 49),
    ("ACTIONWD", 50),
    ("ACTIONJA", 51),
    ("ACTIONJB", 52),
    ("ACTIONJC", 53),
    ("ACTIONHA", 54),
    ("ACTIONHB", 55),
    ("ACTIONHC", 56),
    ("ACTIONHD", 57),
    ("ACTIONKA", 58),
    ("ACTIONKB", 59),
    ("ACTIONKC", 60),
    ("ACTIONKD", 61),
    ("ACTIONMA", 62),
    ("ACTIONMB", 63),
    ("ACTIONMC", 64),
    ("ACTIONMD", 65),
    ("ACTIONME", 66),
    ("ACTIONMF", 67),
    ("ACTIONMG", 68),
    ("ACTIONMH", 69),
    ("ACTIONMI", 70),
    ("ACTIONMJ", 71),
    ("ACTIONMK", 72),
    ("ACTIONML", 73),
    ("ACTIONMM", 74),
    ("ACTIONMN", 75),
    ("EXPSECRET", 0),
    ("EXPQUEST", 1),
    ("EXPDARE", 2),
    ("EXPKILL", 3),
    ("EXPMURDER", 4),
    ("EXPREVENGE", 5),
    ("EXPTEAMWORK", 6),
    ("EXPROLEPLAY", 7),
    ("MESSAGEDEATH", 0),
    ("MESSAGEHATE", 1),
    ("MESSAGEOUCH", 2),
    ("MESSAGEFRAG", 3),
    ("MESSAGEACCIDENT", 4),
    ("MESSAGECOSTUME", 5),
    ("ORDERMOVE", 0),
    ("ORDERATTACK", 1),
    ("ORDERASSIST", 2),
    ("ORDERSTAND", 3),
    ("ORDERTERRAIN", 4),
    ("WHITE", 0),
    ("RED", 1),
    ("YELLOW", 2),
    ("GREEN", 3),
    ("BLUE", 4),
    ("PURPLE", 5),
    ("FXNOREFLECT", 1),
    ("FXDRAWREFLECT", 2),
    ("FXANIM", 4),
    ("FXWATER", 8),
    ("FXBARRIER", 16),
    ("FXIMPASS", 32),
    ("FXDAMAGE", 64),
    ("FXSLIPPY", 128),
    ("TEAMA", 0),
    ("TEAMB", 1),
    ("TEAMC", 2),
    ("TEAMD", 3),
    ("TEAME", 4),
    ("TEAMF", 5),
    ("TEAMG", 6),
    ("TEAMH", 7),
    ("TEAMI", 8),
    ("TEAMJ", 9),
    ("TEAMK", 10),
    ("TEAML", 11),
    ("TEAMM", 12),
    ("TEAMN", 13),
    ("TEAMO", 14),
    ("TEAMP", 15),
    ("TEAMQ", 16),
    ("TEAMR", 17),
    ("TEAMS", 18),
    ("TEAMT", 19),
    ("TEAMU", 20),
    ("TEAMV", 21),
    ("TEAMW", 22),
    ("TEAMX", 23),
    ("TEAMY", 24),
    ("TEAMZ", 25),
    ("INVENTORY", 1),
    ("LEFT", 2),
    ("RIGHT", 3),
    ("EASY", 0),
    ("NORMAL", 1),
    ("HARD", 2),
)


# Predefined variables: (name, opcode). Some opcodes have two names.
VARIABLES = (
    ("tmpx", 0),
    ("tmpy", 1),
    ("tmpdist", 2),
    ("tmpdistance", 2),
    ("tmpturn", 3),
    ("tmpargument", 4),
    ("rand", 5),
    ("selfx", 6),
    ("selfy", 7),
    ("selfturn", 8),
    ("selfcounter", 9),
    ("selforder", 10),
    ("selfmorale", 11),
    ("selflife", 12),
    ("targetx", 13),
    ("targety", 14),
    ("targetdistance", 15),
    ("targetturn", 16),
    ("leaderx", 17),
    ("leadery", 18),
    ("leaderdistance", 19),
    ("leaderturn", 20),
    ("gotox", 21),
    ("gotoy", 22),
    ("gotodistance", 23),
    ("targetturnto", 24),
    ("passage", 25),
    ("weight", 26),
    ("selfaltitude", 27),
    ("selfid", 28),
    ("selfhateid", 29),
    ("selfmana", 30),
    ("targetstr", 31),
    ("targetwis", 32),
    ("targetint", 33),
    ("targetdex", 34),
    ("targetlife", 35),
    ("targetmana", 36),
    ("targetlevel", 37),
    ("targetspeedx", 38),
    ("targetspeedy", 39),
    ("targetspeedz", 40),
    ("selfspawnx", 41),
    ("selfspawny", 42),
    ("selfstate", 43),
    ("selfstr", 44),
    ("selfwis", 45),
    ("selfint", 46),
    ("selfdex", 47),
    ("selfmanaflow", 48),
    ("targetmanaflow", 49),
    ("selfattached", 50),
    ("swingturn", 51),
    ("xydistance", 52),
    ("selfz", 53),
    ("targetaltitude", 54),
    ("targetz", 55),
    ("selfindex", 56),
    ("ownerx", 57),
    ("ownery", 58),
    ("ownerturn", 59),
    ("ownerdistance", 60),
    ("ownerturnto", 61),
    ("xyturnto", 62),
    ("selfmoney", 63),
    ("selfaccel", 64),
    ("targetexp", 65),
    ("selfammo", 66),
    ("targetammo", 67),
    ("targetmoney", 68),
    ("targetturnfrom", 69),
    ("selflevel", 70),
    ("targetreloadtime", 71),
    ("selfcontent", 72),
    ("spawndistance", 73),
    ("targetmaxlife", 74),
    ("targetteam", 75),
    ("targetarmor", 76),
    ("difficulty", 77),
    ("timehours", 78),
    ("timeminutes", 79),
    ("timeseconds", 80),
    ("datemonth", 81),
    ("dateday", 82),
)


class ScriptOperator(IntEnum):
    """Operator codes packed into operand words."""

    ADD = 0
    SUB = 1
    AND = 2
    SHR = 3
    SHL = 4
    MUL = 5
    DIV = 6
    MOD = 7


OPERATORS = (
    ("+", ScriptOperator.ADD),
    ("-", ScriptOperator.SUB),
    ("&", ScriptOperator.AND),
    (">", ScriptOperator.SHR),
    ("<", ScriptOperator.SHL),
    ("*", ScriptOperator.MUL),
    ("/", ScriptOperator.DIV),
    ("%", ScriptOperator.MOD),
)
