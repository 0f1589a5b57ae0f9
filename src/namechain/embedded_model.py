# Generated by src/train.py --emit-module; do not edit by hand.

ENCODED_MARKOV_CHAIN = (
    "eNrtnctuHEcSRf+Fay46MuvRrV8ZzMKYMeCFYA0Ee2X0vw9pi+oq1isfUZVRnQeGrwyK3WrKt+J5"
    "I+Kvl//++r8/fnv54l9fvn/79sfLl79efvn+/eXLv37/8+vXVyAP+MvkfzsAZIAkvvDfry//+fbn"
    "728WXe4QEgIVhxEhrX0kd8dyA3hywJ5FjTCc0LVe8Oacqr/v994NQS2OGAASwKmlC9Zg9Al5ZDCX"
    "/F0AJ8hbIC6EtOhFKZ1DyBpK56OcHcYTKALAYaZxV/MGwan22Osz69fX4TmAVQTOk+6EuX2YCkmf"
    "IP9eCAFgN44YAgCauYxopBNmxEM8IFhDABhDe4QJau/wHXj2ImZecfLx6p7OIYClBJ62ZpRSBkJL"
    "BGDFADuWzdYc9sKn4UEBsJ6AuXS73AwYs10A9hGwvSogrJ0IU4HSkt10Tw57gdK0DmfvqEMDfwkK"
    "AeBYfxvrauEsULpWXq5MvpZC8WQABABABcoJtffmAcDaAUDpPZFQE+6Y30QBSYn9zI9bQ1Is6VPt"
    "9KFvQwYB4EdtarR5LqDwlhe+7unFB48D+2krH/mXBZaGbwQQnx/ytdCwRnsob3bMR5g22aslzbAU"
    "MGBVn84z0XLNTkhTgXRnvkflpMNMVlM1XvtIzdr+KNn8Ydz0DaK89Y1okcfERTw4EkDKeBp20LBG"
    "a9g+6ORGv2xzrP37xXE/4iAi7IgIgdRioGiVEKcLHeFjfamGf2S6zVrFcMbc+dfb7Ld2obxrLnje"
    "evztHDQLdswFWD2fYvkGYR+LOeuCiVlyblzva2MfJ5eyb3lQhWFhDTZaJSZUCQGhYs2phhSOIAZR"
    "IdmIDZskdkLOkmSEh0BpRXbKWhvXk+Eg0QZYWxjiRp1WO61nOQeg6Tuvit5TLrATMJd+cA0FMNW7"
    "mQ5awcraWXlJjzu1OckRXMyiMTtJL49C+Q6vlygStuj6yZ8NGkemk6lNqqQ5kk1FtK6AfJomcbrE"
    "DmTiNeuseItih+YeQDHws5Za5n7p8msuyLKAFM/n9ksriOUABf6+xYFao8QUYGqFfvMLTanqi1xJ"
    "FWovBsqRkSj+GlgQFvoILokqFx80ZO0M4HTIJhrmEJtYOQRFht27AkeuD3vqP/7jGknDAQMbKAgs"
    "87BRixV9cLKCkAYwIKtFkm1Q2yfFS4Vt/M+QFSM6BpCBvFaL19pk3WcJFqQj70YRAJw4BQ1a2wI1"
    "CaxNwF7HwuA2YGdBURK3oXClWYG9U8aMcgJ6jWZp8w3qFUYCRoICqtCAygS8U6QiJekqvasLo1P7"
    "IX+Vn9fsZFReimiLDDjHHhpgyC8b2QuK1noHSMayVtmk7dh+NgpL+52n5g7Y3hsHNak8BvNX9LnO"
    "iRPgQA5HrozDOgKHT4aG6ThgJVA6uqT8DXiN79TsxGTKYB1URkcLkDOQFQCU8wDoSmoAGCekxLpv"
    "Ak3AolWNmByArvXCNYx+bk6T2L7mq7AdJyMwdHpvm7WDASoCK2Uev9bO+/E90+N58RaRPOfpuq5J"
    "hUOXKUzIsoUCC3HTpd+Mq4t0VlTkWZptYeSFgETQ0+3Ew47+IbCzhjW9qw01a9ZvuelVFNGxpnGb"
    "CHHVlVHQJQkKf5DO70BBosUqXbC076VAl0TEESX7udZLqIAViT9B4LYpa46ZgpILphBQhi4zg4aQ"
    "RxeOj1r4LyPj5hZ2inRTYziTjUj3kc9E2MpBxbCHaDwNEWwfh3zSDWLJRGUD0oaKtDBurTQjse8l"
    "aS8fX5SHfFDd1JALhKyZfG3hZXPobOCiomVUKlbjp4HSeh3YCJjaNsJ4AHC+wb4Bax3nGFlzAwBl"
    "19zAT7hTquW7SM4rrpHxwMIx3vTIBFayejY2a9bTb6a1+QN30kNGXLbBpJdTKEBKpW98uUcziBQo"
    "Cew2ukwHBXgi3Q02EjBB3Ij9iOtJO1aWvgZQiU3Jsxo8EoDNwo6KXAtyPt0kUpFP5l/b5K7MePUC"
    "PARmjFuxExZICIESIlYICehAuxAq5geQtzspDkGqyc/F5ChgSmDBvk2gzTSezY5W8kLqDSgmLGTf"
    "wIF+1u3ePWrzes5srqNzDZAJl+hcQ2Yg2pXKevUwKcOAiIBRqwo1axww8aHyht21aYhxgEhq+bX6"
    "okvOqpfGpKAnEG35ZG64yilMO99w3sB+nRENXS2sBEprKNBBABZWQAWtGYtqqHCmj44MgBX6HAN6"
    "fT9LERuI4KULY2DWjk7uk1We4PahNRcXUJKJt4NsqK5XBigfu7hcultVcMVs8QDCvbWfWtQ+uYo4"
    "SGIJCIEJwbpj/+xRVwQ2Ujn+57eC5Q0uzzEPfLJjIrTWicvph9uWDkr6zysxnIR/NU8sySWWd2oD"
    "8wMacrjijNYzxdi2c3UW6UdvKNM/Y1y02a5mr2sQaPeS9UZQ9qLfEWbhau3BYN6PI8o16w5ZFpAw"
    "0i6Zr6eFV8gUiglru9ok8VHnn9x0gwgFa0AjRQ7VKMjCG3TBeXCPGwYKNEnCgkNq1sQOs6u6bJFz"
    "zrH3VBgBCID9smO4YvfWwF7q1HbY64gJgafdCsbRUWJE/i5wvwa8LIQEWAsHnJtjfuELkrKxZkZT"
    "DRWB0kaTw/CAvdJjWEoMU4HSzIepwDlMcV6ZkU0RVO+Ap23zkgYAT9cZg8KQ77zSGagORM88bbX/"
    "2rmlItf8lh89P9rMJqVesBKmZr1a6Vge12LrgubTOGiyW29eu483k1RbeEX3Sn709k8Txsal3Qxt"
    "6Mq5tVFlOFhp/hwyhXxIqDla2AAda44KfeyUqATu/HIxW+Qo6ADqy0+U8hZGSYAmvR6ZH1o8qHjN"
    "ky2wrxNdBVB1uNdERYU+xQ6yHxhIWom0T/5Nrvu0QX/MynMXEet92mvt/65AJ3yKQQ7hqT8DYYXA"
    "n7XqJX2Dwp0xgY7wLyx1PVjmyAlswEA7ZyRahJBU/lLFC6I1XMfMEYlQcLbTqHaPx7fiKTQCFlWz"
    "a0sO4ziOUpHWBFDjyCf8BMzzE2rCz/MOdcJemHrykWQoXF/aGtiGdgudYhewPjNCKg0DK4fbp15x"
    "UEE6ejR+scBCU+Q8blPSX+Ni+8TL9421unEe5tUY4rnY75y8oJ9+XYI+PHpWIJ2dO0plMIV1Z7Ea"
    "n/V9O4PLcsgXUhIgdg3D/NebPJH1lSI5YMnYIiIE7HZtICTSVjuEZMsCGXRpYrOrEDBF8QVJK9Ss"
    "mTbuUeKWIsaRHsw5UgbJfH270EIJ4pKM3kiU2n8exwzI5u87MhagiHMus8W1vae68q6HxcxdATjO"
    "qLfIX0FDDgEoEFUpr+B4U/VFlXli+X0DvPFKLihYu927qNm3Nl2r0KPoArQWGOGfAQvNYtEKFRus"
    "I9yzsPQISgIx2weRcwGHhIpuc0w0cD2hz0qo2SRcedEwSOnShM+/pxIRW1iR4H48X9w/RFqfB48X"
    "9v43P7UyqUtCGjQywNaT4QO8eK7hQ1oAOA1D7aOXYU+HQmFirTXr9sPY/eBiN0ou2jXu9rNf74Jl"
    "WRcsIKAUmfbZ/pjtNZWzzEd45x3VqvAQSJJF+I+SjUsu1QxaypRlAHYyACdtL/s99bCUEAEWKAE4"
    "9RVChgaaDC0zzQY8rXXIPCbCEwLskUdIhBJmZln6kl7aBbu9CyuLkKFaAoaPARcbBEzs3U1ZGoiN"
    "BOxYWmwk4My4/IUNR/CyImgyKetUywMPRt6wj1hKS0mNQ+kKxDG1eZR5urzpp0FOg2EEtiejDiz1"
    "YBWBGaH/2tHGPZtETKQA80awLxU6osimdqjSN/fZVOzvdLABa5KPFN2XcCcFQM8D7BkhFlvwdbtn"
    "vhoiYxqAp57YgK6A2bnLMLpCUlhpnqQEDcCZH4QpwWFlpVqv7akVeezlGou5r3nxqod7wKRT7Iv6"
    "e/pyQIxuIVk/G9LNgIt1xYDy8MnuDf0CO+Xneq7mg6vSPFSFiV1gnDEi1a/Ra39VldqjbUiQsTbo"
    "3uxZM7JizRq9/Nu/Touug6yE204AsybAWQSD7sBKI/sKKVBbrGJzrbZeJ+0/uCdrNnRwAOpnEbuf"
    "29wUQLae0XisYJLz3XHHP8cXK6eiH/2mxHrp/EES4fjOeTQCovsa2WyiSFKaEy5+5LgEYEBtwwJ1"
    "SKUULOpRkaWH1UpZDa49XODles7dEFwiQwaey0whQwbs0RVWAvY4y5wncCInHztCB2eB0izH8QNn"
    "mNUkzwdW+enCyndBRHbZtL1hTIGEmrLTmqmDj4DE8mjmbpm8in/M3OXMmNAbBgwMpDBeUnkeImvu"
    "uC2W59Drrde6SSzDez1N4YCCLQYRMGKr0RQCZyhJQk3SktTXuDyxIYvOgRUCyYGmkxPKNQ+xb1Ov"
    "zRmwkgQXzWTU0y+W+cid/eYftdQJvI0Ymn7deyDuJ1mpEJpY4s7Ue7xmgoKUB7ArMIt6TceOB0ai"
    "gKee16TWC7DQAMBC0nwAnm1GD5Kib7ZjP7mWDhgwsWtWE34CptQuEBIouplzqtmnxgnsQVO3f/gJ"
    "Jeur5rRBR2ffG8Pt9KU+7eTTzHknTGJ9LB6++haWqXczm6yb0YuXZu7XpYHULoFkWvuF/5Ycd8zp"
    "48oLlW5z4rN9v9HoFn4roeY5c34WewjYW2AHISFkUcJy6g7moVMDzjfHIo96zkjqL3n0HvCPiU/A"
    "gNVle2zV0G3Kf6671H/Wg0WoCMz76sCReKcYKXIznjJjbu9QaZESO2ABu1OhsBLQdOgKIp2AWLOh"
    "NMm8NIA1KjBvxSgLEJ6CiH5+MpAyQEWgfNaMbQSWDF+xASoWGAF56+Rk7k4AWlfgjOoaVpkA+gm3"
    "7FX+g5c1E8xrmNIm31JyHKpydU27yTzZfXZZyGSwjioT89d8LnK8EfBJyY9ohY0jkRdkrNQc+gWT"
    "Fkgzp3Ymj/oO0JlpwDCgArSJc1P5/nkqes3KviEzIi+AtkmIn23yZkgGZseztQuIc4VuoeJ8VS4D"
    "wkvgn9y1iWenRrl61UxCTCCYhkepHfx9v/duOHdLggIAhy33WtvIDjkhU2oZT60dQpICJPcz9p7c"
    "a7iUBigqBfciKYQE8uCmSMjbjhm0g+1kskCdg02MJAH2BuXWqIlhBYwxVZe9UB041WPCQWfAsgUn"
    "xgUUeLfjIlh33+VtWU1G2AU8q5c7KMPgwQJsLLo5PnVnwzXgLRGS/UyAPjXzR57ZAgFYqdBvxsWQ"
    "FCgdBKQMxwyIzWk16k0AYEAqBD8BE0Ei/AQspy5h9XqYCpSulu/UmN4cU5zLji5dd7//H+f2ge0="
)
